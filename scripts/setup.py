#!/usr/bin/env python3
"""
Setup script for eGrab.
Installs the package, its Playwright dependency and the Chromium browser.
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_command(cmd, description):
    """Run one setup step, echoing the command and reporting its outcome."""
    print(f"\n📦 eGrab setup: {description}\n   $ {cmd}")
    result = subprocess.run(cmd, shell=True, capture_output=True, text=True)
    if result.returncode != 0:
        print(f"❌ {description} failed (exit {result.returncode})")
        if result.stderr:
            print(result.stderr.strip())
        return False
    print(f"✅ {description}")
    return True


def main():
    print("🚀 Setting up eGrab...")

    if sys.version_info < (3, 8):
        print("❌ Python 3.8+ required")
        sys.exit(1)

    dev = "--dev" in sys.argv[1:]
    target = f'"{PROJECT_ROOT}[test]"' if dev else f'"{PROJECT_ROOT}"'
    if not run_command(
        f"{sys.executable} -m pip install -e {target}",
        "Installing eGrab" + (" with test extras" if dev else "")
    ):
        sys.exit(1)

    if not run_command(
        f"{sys.executable} -m playwright install chromium",
        "Installing Chromium browser"
    ):
        sys.exit(1)

    print("\n✅ Setup complete! You can now run:")
    print("   egrab https://example.com --selector 'main' --mode all")


if __name__ == "__main__":
    main()
