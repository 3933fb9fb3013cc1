"""`python -m db2jsonschema` 진입점."""

from db2jsonschema.cli import main

if __name__ == "__main__":
    main()
