"""Allow ``python -m create_express_app``."""

from create_express_app.pipeline import main

main()
