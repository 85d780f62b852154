import requests
import sys

BASE_URL = "http://localhost:3001/api"


def print_step(step_name):
    print(f"\n{'='*50}")
    print(f"STEP: {step_name}")
    print(f"{'='*50}")


def check(response, expected_status):
    if response.status_code != expected_status:
        print(f"FAILED: expected {expected_status}, got {response.status_code}: {response.text}")
        sys.exit(1)
    body = response.json()
    print(f"{response.status_code} {body}")
    return body


def run_test():
    print("Starting feedback lifecycle walkthrough against", BASE_URL)

    print_step("1. Submit feedback")
    created = check(requests.post(f"{BASE_URL}/feedback", json={
        "name": "Ann",
        "email": "a@x.com",
        "message": "great app",
        "type": "feature",
    }), 201)
    feedback_id = created["id"]
    assert created["status"] == "pending"

    print_step("2. Resolve it")
    updated = check(requests.put(f"{BASE_URL}/feedback/{feedback_id}", json={"status": "resolved"}), 200)
    assert updated["status"] == "resolved"

    print_step("3. List shows the resolved record")
    listing = check(requests.get(f"{BASE_URL}/feedback"), 200)
    assert any(item["id"] == feedback_id and item["status"] == "resolved" for item in listing)

    print_step("4. Stats")
    check(requests.get(f"{BASE_URL}/feedback/stats"), 200)

    print_step("5. Delete it")
    check(requests.delete(f"{BASE_URL}/feedback/{feedback_id}"), 200)
    listing = check(requests.get(f"{BASE_URL}/feedback"), 200)
    assert all(item["id"] != feedback_id for item in listing)

    print_step("6. Chat passthrough")
    response = requests.post(f"{BASE_URL}/chat", json={"message": "hello"})
    print(f"{response.status_code} {response.text[:200]}")

    print("\nWalkthrough complete.")


if __name__ == "__main__":
    run_test()
