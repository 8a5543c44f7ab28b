"""Allow ``python -m git_log_analyzer``."""

from git_log_analyzer.cli.main import main

if __name__ == "__main__":
    main()
