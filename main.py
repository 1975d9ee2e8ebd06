"""Generate HTML API documentation, optionally running dev checks first."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the documentation pipeline for a project file."""
    parser = argparse.ArgumentParser(
        description="Generate static HTML documentation from project metadata."
    )
    parser.add_argument(
        "project_file",
        nargs="?",
        default="project.yml",
        help="Project metadata file (default: project.yml)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run linting and tests before generating documentation",
    )
    parser.add_argument(
        "--output-path",
        help="Directory to write HTML into",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration overrides file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    python_exe = sys.executable

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([python_exe, "-m", "ruff", "check", "."], cwd=root_dir)
        run_command([python_exe, "-m", "pytest"], cwd=root_dir)
        print("\nDevelopment checks passed. Proceeding with documentation generation.\n")

    print("--- Generating HTML documentation ---")
    cmd = [python_exe, "-m", "apidoc.write_docs", args.project_file]
    if args.output_path:
        cmd.extend(["--output-path", args.output_path])
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)
    print("\nSUCCESS: Documentation generated")


if __name__ == "__main__":
    main()
