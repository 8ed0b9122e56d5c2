import sys
import time

import requests

BASE_URL = "http://127.0.0.1:8080"


def log(msg, status="INFO"):
    print(f"[{status}] {msg}")


def test_health():
    try:
        r = requests.get(f"{BASE_URL}/api/health", timeout=5)
        if r.status_code == 200 and r.json().get("status") == "ok":
            log("Health check: PASS", "SUCCESS")
            return True
        log(f"Health check: FAIL (Status {r.status_code})", "ERROR")
        return False
    except requests.RequestException as e:
        log(f"Health check: FAIL ({e})", "ERROR")
        return False


def test_pools_endpoint():
    try:
        r = requests.get(f"{BASE_URL}/api/pools", timeout=60)
        if r.status_code != 200:
            log(f"Pool list: FAIL (Status {r.status_code})", "ERROR")
            return False
        data = r.json()
        if not isinstance(data, list):
            log("Pool list: FAIL (Invalid JSON structure)", "ERROR")
            return False
        for pool in data:
            log(f"  {pool['id']}: {pool['question_count']} questions", "INFO")
            if pool.get("failed"):
                log(f"  {pool['id']}: {pool['failed']}", "WARN")
        log(f"Pool list: PASS (Found {len(data)} pools)", "SUCCESS")
        return True
    except requests.RequestException as e:
        log(f"Pool list: FAIL ({e})", "ERROR")
        return False


def test_library_sample():
    try:
        r = requests.post(f"{BASE_URL}/api/pools/library/sample", json={"count": 5}, timeout=60)
        if r.status_code != 200:
            log(f"Library sample: FAIL (Status {r.status_code})", "ERROR")
            return False
        data = r.json()
        if any("answer" in q for q in data["questions"]):
            log("Library sample: FAIL (answers leaked into sampled questions)", "ERROR")
            return False
        ids = [q["id"] for q in data["questions"]]
        if len(ids) != len(set(ids)):
            log("Library sample: FAIL (duplicate questions in one draw)", "ERROR")
            return False
        log(f"Library sample: PASS ({data['selected_count']} drawn, depleted={data['depleted']})", "SUCCESS")
        return True
    except requests.RequestException as e:
        log(f"Library sample: FAIL ({e})", "ERROR")
        return False


def run_tests():
    log("Starting Smoke Screen Tests...", "INFO")

    try:
        requests.get(f"{BASE_URL}/api/health", timeout=2)
    except requests.RequestException:
        log("Server not reachable immediately, waiting 2s...", "WARN")
        time.sleep(2)

    results = [
        test_health(),
        test_pools_endpoint(),
        test_library_sample(),
    ]

    if all(results):
        log("ALL SMOKE TESTS PASSED", "SUCCESS")
        sys.exit(0)
    else:
        log("SOME SMOKE TESTS FAILED", "ERROR")
        sys.exit(1)


if __name__ == "__main__":
    run_tests()
