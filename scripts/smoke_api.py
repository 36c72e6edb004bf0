#!/usr/bin/env python3
"""
Command-line script that walks a running Todos API through one full lifecycle:
create, fetch, update, list, delete.
Optional environment variables:
- TODOS_API_URL: Base URL of the server (default http://127.0.0.1:5000)
"""

import os
import sys
import requests
from dotenv import load_dotenv
from pathlib import Path

# Load environment variables from .env file
# Look for .env file in the project root (parent directory of scripts/)
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
else:
    load_dotenv()  # Fallback to default behavior

DEFAULT_BASE_URL = 'http://127.0.0.1:5000'


def check(response, expected_status, label):
    """Print the outcome of one call; return True if the status matched."""
    ok = response.status_code == expected_status
    marker = 'OK  ' if ok else 'FAIL'
    print(f"{marker} {label}: {response.status_code} (expected {expected_status})")
    return ok


def run_smoke(base_url):
    """Run the lifecycle against base_url. Returns a process exit code."""
    base_url = base_url.rstrip('/')

    try:
        response = requests.post(f"{base_url}/todos", json={'text': 'smoke test todo'}, timeout=10)
        if not check(response, 201, 'create'):
            return 1
        todo_id = response.json()['todo']['id']

        response = requests.get(f"{base_url}/todos/{todo_id}", timeout=10)
        if not check(response, 200, 'get'):
            return 1

        response = requests.put(f"{base_url}/todos/{todo_id}", json={'text': 'smoke test todo (edited)'}, timeout=10)
        if not check(response, 200, 'update'):
            return 1

        response = requests.get(f"{base_url}/todos", params={'searchTerm': 'edited'}, timeout=10)
        if not check(response, 200, 'list'):
            return 1

        response = requests.delete(f"{base_url}/todos/{todo_id}", timeout=10)
        if not check(response, 200, 'delete'):
            return 1

    except requests.exceptions.RequestException as e:
        print(f"Error talking to {base_url}: {e}", file=sys.stderr)
        return 1

    print("Smoke test passed.")
    return 0


if __name__ == "__main__":
    sys.exit(run_smoke(os.getenv('TODOS_API_URL', DEFAULT_BASE_URL).strip()))
