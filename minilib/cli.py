"""Command that prints a greeting and a diagnostic line."""

from .printf import dprintf, printf


def main(argv=None):
    """Print a greeting to standard output and a message to standard error."""
    printf("Hello %s %c\n", "World", "!")
    dprintf(2, "%s output --> %i\n", "Error", 2)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())