"""Handler for 'dropselect demo'."""

import logging

from dropselect.cli._common import error, load_options, setup_logging

logger = logging.getLogger(__name__)


def demo(args) -> int:
    setup_logging(args.verbose)

    options = None
    if args.options_file:
        try:
            options = load_options(args.options_file)
        except ValueError as e:
            return error(str(e))
        logger.info("loaded %d options from %s", len(options), args.options_file)

    from dropselect.demo import SelectDemoApp

    app = SelectDemoApp(options, option_label_key=args.label_key)
    app.run()
    return 0
