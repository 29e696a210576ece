"""
Lint script runner.
"""
import subprocess
import sys

TARGETS = ["./sluglang", "./slug.py"]


def main() -> int:
    """
    Lint the Slug project using flake8 and pylint, then run the test suite.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        *TARGETS,
        "--exclude=sluglang/tests",
        "--max-line-length=110",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        *TARGETS,
        "--ignore=tests",
        "--max-line-length=110",
    ], check=True)

    print("Running pytest...")
    return subprocess.run([sys.executable, "-m", "pytest", "-q"], check=False).returncode


if __name__ == "__main__":
    sys.exit(main())
