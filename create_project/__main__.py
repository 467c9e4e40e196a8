"""Allow ``python -m create_project``."""

from create_project.pipeline import main

main()
