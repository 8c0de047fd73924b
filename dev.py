"""Developer entry point: format, lint and test, then optionally build docs."""

import argparse
import subprocess
import sys

FIX_STEPS = [
    ("Ruff Formatting", ["uv", "run", "ruff", "format"]),
    ("Ruff Linting & Fixes", ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"]),
]
CHECK_STEPS = [
    ("Ruff Format Check", ["uv", "run", "ruff", "format", "--check"]),
    ("Ruff Lint", ["uv", "run", "ruff", "check"]),
    ("Tests", ["uv", "run", "pytest"]),
]


def run_step(step_name: str, command: list[str]) -> None:
    """Run one step, stopping the whole run when it fails."""
    print(f"\n--- {step_name} ---")
    print(f"$ {' '.join(command)}")
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        print(f"\n❌ {step_name} failed (exit code {result.returncode})")
        sys.exit(result.returncode)


def main() -> None:
    """Run the checks; without --ci also apply fixes and generate docs."""
    parser = argparse.ArgumentParser(description="Format, lint and test php-autodoc.")
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Only verify formatting, lint and tests; change nothing",
    )
    parser.add_argument(
        "generator_args",
        nargs=argparse.REMAINDER,
        help="Arguments passed to php-autodoc after the checks pass",
    )
    args = parser.parse_args()

    steps = CHECK_STEPS if args.ci else FIX_STEPS + CHECK_STEPS[1:]
    for step_name, command in steps:
        run_step(step_name, command)

    if args.ci:
        print("\n✅ CI checks passed.")
        return

    run_step(
        "Documentation Generation",
        ["uv", "run", "python", "-m", "php_autodoc", *args.generator_args],
    )
    print("\n✅ Checks passed and documentation generated.")


if __name__ == "__main__":
    main()
