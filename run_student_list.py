#!/usr/bin/env python3
"""
Student List Runner Script
Runs both the student API and the website
"""

import subprocess
import sys
import time
import os

from simple_api.settings import load_api_settings
from website.settings import load_website_settings

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
SERVICES = [
    ("Student API", "simple_api.app"),
    ("Website", "website.app"),
]
STOP_TIMEOUT = 5  # seconds before a service that ignores terminate() is killed


def start_services(startup_delay=2):
    """Start every service as a child process, API first"""
    processes = []
    for name, module in SERVICES:
        print(f"Starting {name}...")
        processes.append((name, subprocess.Popen([sys.executable, "-m", module], cwd=ROOT_DIR)))
        time.sleep(startup_delay)  # let the API bind before the website can call it
    return processes


def stop_services(processes):
    """Terminate the child processes, website first"""
    for name, proc in reversed(processes):
        if proc.poll() is None:
            proc.terminate()
        try:
            proc.wait(timeout=STOP_TIMEOUT)
        except subprocess.TimeoutExpired:
            print(f"{name} did not stop, killing it")
            proc.kill()
            proc.wait()
        print(f"{name} stopped")


def main():
    api_settings = load_api_settings()
    website_settings = load_website_settings()

    print("Starting Student List System...")
    print("=" * 50)

    processes = []
    try:
        processes = start_services()

        print("Student List System started")
        print(f"Student API: http://localhost:{api_settings['port']}/pozos/api/v1.0/get_student_ages")
        print(f"Website:     http://localhost:{website_settings['port']}")
        print("=" * 50)
        print("Press Ctrl+C to stop all services")

        while all(proc.poll() is None for _, proc in processes):
            time.sleep(1)
        print("A service exited, stopping the others...")

    except KeyboardInterrupt:
        print("\nStopping Student List System...")
    finally:
        stop_services(processes)
        print("All services stopped")


if __name__ == "__main__":
    main()
