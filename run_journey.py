#!/usr/bin/env python3
"""
Bstackdemo journey entry point.

Runs the login → filter → favorite → verify-favorites journey once per entry
in the capability matrix on BrowserStack Automate, outside of pytest, and
prints a per-platform summary. Exits non-zero if any run failed.

Environment variables of interest:
- BROWSERSTACK_USERNAME, BROWSERSTACK_ACCESS_KEY: required grid credentials.
- BSTACK_ENV: 'testing' skips the dotenv file, 'ci' loads browserstack.ci.env,
  anything else loads browserstack.env.
- BSTACK_BASE_URL, BSTACK_PROJECT_NAME, BSTACK_BUILD_NAME: consumed by Config.
"""

import logging
import sys

from bstack_journey import create_runner, build_capabilities, ConfigurationError, Credentials


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    runner = create_runner()

    print("🔐 BrowserStack Config:")
    try:
        credentials = Credentials.from_env()
    except ConfigurationError as e:
        print(f"❌ {e.message}")
        return 2
    for name, marker in credentials.describe().items():
        print(f"   {name} set: {marker}")

    descriptors = build_capabilities(runner.config)
    print(f"🚀 Running journey on {len(descriptors)} platform(s) against {runner.config.BASE_URL}")

    results = runner.run_all(descriptors, credentials)

    print("=" * 50)
    for result in results:
        icon = "✅" if result.passed else "❌"
        print(f"{icon} {result.descriptor}: {result.status} ({result.duration:.1f}s) - {result.reason}")
    return 0 if all(result.passed for result in results) else 1


if __name__ == '__main__':
    sys.exit(main())
