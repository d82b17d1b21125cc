#!/usr/bin/env python3
"""
Simulate a GitHub deployment_status webhook for local testing.

Usage:
    python scripts/simulate_webhook.py --repo owner/repo --state success
"""

import argparse
import hashlib
import hmac
import json
import os

import httpx


def main():
    parser = argparse.ArgumentParser(description="Simulate GitHub deployment_status webhook")
    parser.add_argument("--url", default="http://localhost:3000/webhook")
    parser.add_argument("--repo", required=True, help="Repository (owner/repo)")
    parser.add_argument(
        "--state",
        default="success",
        choices=["success", "failure", "pending", "in_progress", "error"],
        help="Deployment state",
    )
    parser.add_argument("--environment", default="Production", help="Deployment environment")
    parser.add_argument("--sha", default="abc123def4567890abc123def4567890abc123de", help="Commit SHA")
    parser.add_argument("--author", default="octocat", help="Deployment creator login")
    parser.add_argument("--target-url", default=None, help="Deployment URL")
    parser.add_argument(
        "--secret", default=None, help="Webhook secret (or use GITHUB_WEBHOOK_SECRET env)"
    )

    args = parser.parse_args()

    secret = args.secret or os.environ.get("GITHUB_WEBHOOK_SECRET")

    payload = {
        "action": "created",
        "deployment_status": {
            "state": args.state,
            "environment": args.environment,
            "target_url": args.target_url,
        },
        "deployment": {
            "sha": args.sha,
            "environment": args.environment,
            "creator": {"login": args.author},
        },
        "repository": {
            "full_name": args.repo,
            "name": args.repo.split("/")[-1],
        },
    }

    payload_bytes = json.dumps(payload).encode()
    headers = {
        "Content-Type": "application/json",
        "X-GitHub-Event": "deployment_status",
    }
    if secret:
        headers["X-Hub-Signature-256"] = (
            "sha256="
            + hmac.new(
                secret.encode("utf-8"),
                payload_bytes,
                hashlib.sha256,
            ).hexdigest()
        )
    else:
        print("Warning: no secret given, sending unsigned request")

    print(f"Sending webhook to {args.url}")
    print(f"Payload: {json.dumps(payload, indent=2)}")

    response = httpx.post(args.url, content=payload_bytes, headers=headers)

    print(f"\nResponse status: {response.status_code}")
    print(f"Response body: {response.json()}")

    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    exit(main())
