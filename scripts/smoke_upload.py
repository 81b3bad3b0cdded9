"""
Upload a resume to a running server and print the response
"""
import argparse
import json

import requests


def main():
    parser = argparse.ArgumentParser(description="POST a resume to /extract-text")
    parser.add_argument("pdf_path")
    parser.add_argument("--url", default="http://127.0.0.1:3000/extract-text")
    parser.add_argument("--job-description", default="")
    args = parser.parse_args()

    print(f"Endpoint: {args.url}")
    print(f"PDF: {args.pdf_path}")

    data = {}
    if args.job_description:
        data["jobDescription"] = args.job_description

    try:
        with open(args.pdf_path, 'rb') as f:
            files = {'resume': ('resume.pdf', f, 'application/pdf')}
            print("Sending request (this may take 10-20 seconds)...")
            response = requests.post(args.url, files=files, data=data, timeout=90)
    except requests.exceptions.ConnectionError:
        print("Connection failed! Make sure the server is running: python server.py")
        return 1
    except requests.exceptions.Timeout:
        print("Request timed out after 90 seconds")
        return 1

    print(f"Status Code: {response.status_code}")
    print(json.dumps(response.json(), indent=2))
    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    raise SystemExit(main())
