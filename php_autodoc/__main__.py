"""Allow ``python -m php_autodoc``."""

from php_autodoc.cli import main

raise SystemExit(main())
