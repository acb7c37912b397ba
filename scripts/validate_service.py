#!/usr/bin/env python3
"""
Validation script for the short link service.
Exercises a running service end to end: create, redirect, conflicts,
deletion with the edit key.
"""

import argparse
import sys
import time
from datetime import datetime
from typing import Optional

import requests


class ServiceValidator:
    """Validates short link service functionality."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        password: Optional[str] = None,
        admin_password: Optional[str] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.password = password
        self.admin_password = admin_password
        self.session = requests.Session()
        self.test_results = []

    def print_header(self, text: str):
        """Print a formatted header."""
        print(f"\n{'='*60}")
        print(f"  {text}")
        print(f"{'='*60}\n")

    def print_test(self, name: str, passed: bool, details: str = ""):
        """Print test result."""
        status = "✅ PASS" if passed else "❌ FAIL"
        self.test_results.append((name, passed))
        print(f"{status} - {name}")
        if details:
            print(f"       {details}")

    def check_status(self, name: str, response: requests.Response, expected: int) -> bool:
        passed = response.status_code == expected
        self.print_test(name, passed, f"Status: {response.status_code} (expected {expected})")
        return passed

    def test_health_check(self) -> bool:
        """Test health check endpoint."""
        try:
            response = self.session.get(f"{self.base_url}/health", timeout=5)
        except requests.RequestException as e:
            self.print_test("Health Check", False, f"Error: {e}")
            return False

        if response.status_code != 200:
            self.print_test("Health Check", False, f"Status: {response.status_code}")
            return False

        data = response.json()
        is_healthy = data.get("status") == "healthy"
        self.print_test("Health Check", is_healthy, f"Store: {data.get('store')}")
        return is_healthy

    def add(self, url: str, record_id: Optional[str] = None) -> requests.Response:
        body = {"url": url, "password": self.password}
        if record_id is not None:
            body["id"] = record_id
        return self.session.post(f"{self.base_url}/add", json=body, timeout=5)

    def delete(self, record_id: str, key: str) -> requests.Response:
        return self.session.delete(
            f"{self.base_url}/{record_id}",
            json={"id": record_id, "key": key, "password": self.password},
            timeout=5,
        )

    def test_lifecycle(self):
        """Create, follow, and delete a redirect with a chosen id."""
        record_id = f"check{int(time.time())}"
        target = "https://example.com/validation"

        response = self.add(target, record_id)
        if not self.check_status("Create Redirect", response, 201):
            return
        key = response.json()["key"]

        response = self.session.get(f"{self.base_url}/{record_id}", allow_redirects=False, timeout=5)
        location = response.headers.get("Location", "")
        self.print_test(
            "Follow Redirect",
            response.status_code in (302, 303, 307) and location == target,
            f"Redirects to: {location}" if location else "No Location header",
        )

        self.check_status("Duplicate Id Rejection", self.add("https://example.org", record_id), 409)
        self.check_status("Wrong Key Rejection", self.delete(record_id, "not-the-key"), 401)
        self.check_status("Delete Redirect", self.delete(record_id, key), 200)

        response = self.session.get(f"{self.base_url}/{record_id}", allow_redirects=False, timeout=5)
        self.check_status("Deleted Redirect Gone", response, 404)

    def test_generated_id(self):
        response = self.add(f"https://example.com/generated/{int(time.time())}")
        if self.check_status("Create With Generated Id", response, 201):
            data = response.json()
            self.delete(data["id"], data["key"])

    def test_reserved_id(self):
        self.check_status("Reserved Id Rejection", self.add("https://example.com", "add"), 400)

    def test_listing(self):
        response = self.session.get(
            f"{self.base_url}/all",
            params={"password": self.admin_password},
            timeout=5,
        )
        self.print_test(
            "List Redirects",
            response.status_code in (200, 404),
            f"Status: {response.status_code}",
        )

    def run_all_tests(self) -> bool:
        """Run all validation tests."""
        self.print_header("Short Link Service Validation")
        print(f"Testing service at: {self.base_url}")
        print(f"Timestamp: {datetime.now().isoformat()}\n")

        if not self.test_health_check():
            print("\n❌ Health check failed. Service may not be running.")
            print(f"   Make sure the service is accessible at {self.base_url}")
            return False

        print()
        self.test_lifecycle()
        self.test_generated_id()
        self.test_reserved_id()
        if self.admin_password:
            self.test_listing()

        self.print_summary()

        return all(passed for _, passed in self.test_results)

    def print_summary(self):
        """Print test summary."""
        total = len(self.test_results)
        passed = sum(1 for _, p in self.test_results if p)
        failed = total - passed

        self.print_header("Test Summary")
        print(f"Total Tests:  {total}")
        print(f"✅ Passed:     {passed}")
        print(f"❌ Failed:     {failed}")

        if failed > 0:
            print("\n⚠️  Failed tests:")
            for name, ok in self.test_results:
                if not ok:
                    print(f"   - {name}")

        print()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Validate short link service functionality"
    )
    parser.add_argument(
        "--url",
        default="http://localhost:3000",
        help="Base URL of the service (default: http://localhost:3000)"
    )
    parser.add_argument("--password", help="Global password, if the service requires one")
    parser.add_argument("--admin-password", help="Admin password; enables the listing check")

    args = parser.parse_args()

    validator = ServiceValidator(args.url, args.password, args.admin_password)

    try:
        success = validator.run_all_tests()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n\n⚠️  Validation interrupted by user")
        sys.exit(2)
    except requests.RequestException as e:
        print(f"\n\n❌ Validation failed with error: {e}")
        sys.exit(3)


if __name__ == "__main__":
    main()
