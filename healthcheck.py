#!/usr/bin/env python3
"""
Docker health check script for hoopstats.
Checks the web server health endpoint, which also pings the database.
"""

import sys
import urllib.request
import urllib.error
import json
import os


def check_web_api():
    """Check the web API health endpoint."""
    try:
        port = os.getenv('WEB_PORT', '8080')
        url = f'http://localhost:{port}/api/health'

        req = urllib.request.Request(url, headers={'User-Agent': 'HealthCheck/1.0'})
        response = urllib.request.urlopen(req, timeout=5)

        if response.status == 200:
            data = json.loads(response.read().decode())
            return data.get('status') == 'healthy'
        else:
            return False
    except (urllib.error.URLError, OSError, ValueError):
        return False


def main():
    """Main health check function."""
    if check_web_api():
        print("Health check passed: web API and database are healthy")
        sys.exit(0)
    else:
        print("Health check failed: web API is unhealthy")
        sys.exit(1)


if __name__ == '__main__':
    main()
