#!/usr/bin/env python3
"""Run the shiritori test suite; extra arguments are passed to pytest.

    ./run_tests.py                 # everything
    ./run_tests.py -k chain        # only chain tests
"""

import os
import subprocess
import sys


def run_tests(extra_args):
    repo_root = os.path.dirname(os.path.abspath(__file__))
    command = [sys.executable, "-m", "pytest", "tests/", "--tb=short", *extra_args]
    print(f"🧪 {' '.join(command[2:])}")
    try:
        return subprocess.run(command, cwd=repo_root, check=False).returncode
    except FileNotFoundError:
        print("❌ Could not start pytest; install the test extra with: pip install -e '.[test]'")
        return 1


if __name__ == "__main__":
    code = run_tests(sys.argv[1:] or ["-v"])
    print("\n✅ All tests passed!" if code == 0 else f"\n❌ pytest exited with {code}")
    sys.exit(code)
