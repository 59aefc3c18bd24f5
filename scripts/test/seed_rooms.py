# scripts/test/seed_rooms.py
"""
Create a demo building, a few rooms and status reports through the running API,
then soft delete one room to show the Inactive state.
Usage: python scripts/test/seed_rooms.py --url http://127.0.0.1:8080/v2 --rooms 3
"""

import argparse
import requests
from datetime import datetime


def post(url, body):
    resp = requests.post(url, json=body, timeout=5)
    resp.raise_for_status()
    return resp.json()


def main():
    parser = argparse.ArgumentParser(description="Seed the campus rooms API with demo data")
    parser.add_argument("--url", default="http://127.0.0.1:8080/v2")
    parser.add_argument("--rooms", type=int, default=3)
    parser.add_argument("--owner", type=int, default=7)
    parser.add_argument("--delete-first", action="store_true",
                        help="soft delete the first created room")
    args = parser.parse_args()

    building = post(f"{args.url}/building", {
        "name": "Demo Hall", "abbr_name": "DH", "resource_owner": args.owner,
    })
    print(f"Building {building['id']} created")

    stamp = datetime.utcnow().strftime("%Y-%m-%d")
    created = []
    for n in range(1, args.rooms + 1):
        room = post(f"{args.url}/room", {
            "room_number": str(100 + n),
            "max_occupancy": 4 * n,
            "building_id": building["id"],
            "resource_metadata": {"resource_owner": args.owner, "resource_creator": args.owner},
            "current_status": [{"submitter_id": args.owner, "submitted_date_time": stamp,
                                "whiteboard_cleaned": True}],
        })
        created.append(room)
        print(f"Room {room['id']} #{room['room_number']} created "
              f"({len(room['current_status'])} status)")

    if args.delete_first and created:
        resp = requests.delete(f"{args.url}/room/{created[0]['id']}", timeout=5)
        resp.raise_for_status()
        print(f"Room {created[0]['id']} state: {resp.json()['resource_metadata']['state']}")

    statuses = requests.get(f"{args.url}/room/status/date", params={"date": stamp}, timeout=5).json()
    print(f"{len(statuses)} status record(s) submitted on {stamp}")


if __name__ == "__main__":
    main()
