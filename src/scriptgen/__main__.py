"""Module entrypoint for `python -m scriptgen`."""

from scriptgen.cli import main

raise SystemExit(main())
