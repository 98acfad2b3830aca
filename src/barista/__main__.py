"""CLI entry point for barista.

Usage:
    python -m barista "who knows fhir and x12"
    printf 'recent lop\\nmore\\n' | python -m barista
    python -m barista --search "how do i get jira access"
"""

from barista.cli import main

if __name__ == "__main__":
    main()
