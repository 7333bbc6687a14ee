#!/usr/bin/env python3
# =============================================================================
# scripts/demo.py - API Walk-Through
# =============================================================================
# Exercises a running Email Backend against its HTTP API:
# health, teams, submissions, filtering, status update, stats, email status.
#
# Usage:
#   poetry run uvicorn app.main:app &
#   poetry run python scripts/demo.py [base_url]
# =============================================================================

import sys

import httpx

BASE_URL = "http://localhost:3000"

SAMPLE_APPLICATIONS = [
    {
        "applicantName": "Sarah Chen",
        "applicantEmail": "sarah.chen@example.com",
        "position": "Senior Full Stack Developer",
        "team": "Engineering",
        "resumeUrl": "https://example.com/sarah-resume.pdf",
        "coverLetter": (
            "I have 6 years of experience in React, Node.js, and cloud technologies. "
            "I am passionate about building scalable web applications."
        ),
    },
    {
        "applicantName": "Michael Rodriguez",
        "applicantEmail": "m.rodriguez@example.com",
        "position": "Product Manager",
        "team": "product",
        "coverLetter": "I have led three B2B SaaS products from discovery to launch.",
    },
    {
        "applicantName": "Emma Thompson",
        "applicantEmail": "emma.t@example.com",
        "position": "Growth Marketing Lead",
        "team": "Marketing",
        "resumeUrl": "https://example.com/emma-resume.pdf",
    },
]


def main(base_url: str) -> int:
    with httpx.Client(base_url=base_url, timeout=30) as client:
        print("1. Checking system health...")
        health = client.get("/health").json()
        print(f"   Status: {health['status']}\n")

        print("2. Getting available teams...")
        teams = client.get("/api/teams").json()
        print(f"   Available teams ({teams['count']}):")
        for team in teams["teams"]:
            print(
                f"   - {team['name']}: {len(team['executives'])} executives, "
                f"{len(team['projectLeads'])} project leads"
            )
        print()

        print("3. Submitting sample applications...")
        submitted = []
        for payload in SAMPLE_APPLICATIONS:
            response = client.post("/api/applications", json=payload)
            body = response.json()
            if response.status_code != 201:
                print(f"   x {payload['applicantName']}: {body.get('message')}")
                continue
            submitted.append(body["application"])
            notification = body["notification"]
            print(f"   + {payload['applicantName']} -> {payload['position']}")
            print(f"     notified: {', '.join(notification['recipients'])} ({notification['details']})")
        print()

        print("4. Submitting to a team that doesn't exist...")
        response = client.post("/api/applications", json={
            "applicantName": "Nobody",
            "applicantEmail": "nobody@example.com",
            "position": "Astronaut",
            "team": "Space",
        })
        body = response.json()
        print(f"   {response.status_code}: {body['message']}")
        print(f"   valid teams: {', '.join(body.get('details', {}).get('availableTeams', []))}\n")

        print("5. Listing Engineering applications...")
        listing = client.get("/api/applications", params={"team": "engineering"}).json()
        print(f"   {listing['count']} application(s)\n")

        if submitted:
            first = submitted[0]
            print(f"6. Moving {first['applicantName']} to interview...")
            response = client.patch(
                f"/api/applications/{first['id']}/status",
                json={"status": "interview"},
            )
            print(f"   status: {response.json()['application']['status']}\n")

        print("7. Application statistics...")
        stats = client.get("/api/applications/stats/summary").json()["stats"]
        print(f"   total: {stats['total']}, last 7 days: {stats['recent']}")
        print(f"   by status: {stats['byStatus']}")
        print(f"   by team: {stats['byTeam']}\n")

        print("8. Email transport status...")
        status = client.get("/api/teams/email/status").json()
        print(f"   configured: {status['configured']} - {status['emailService']['message']}")

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else BASE_URL))
