from __future__ import annotations

import logging
import os
import sys
from typing import Callable, NoReturn, Optional, Sequence, TextIO

from sittervendor.core.errors import VendorError
from sittervendor.core.report import render_freshness, render_tags
from sittervendor.logging.factory import DefaultLoggerFactory
from sittervendor.logging.helpers import get_logger
from sittervendor.parsing.parser import VERBS, _build_parser
from sittervendor.runtime.container import VendorBuilder, VendorConfig
from sittervendor.runtime.runner import VendorRunner

logger = get_logger('sittervendor')

BuilderFactory = Callable[[VendorConfig], VendorBuilder]


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    mode = (bool(enable_json), bool(verbose))
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    level = logging.DEBUG if verbose else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('sittervendor')
    setattr(_configure_logging, '_configured_mode', mode)


class SitterVendor:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        builder_factory: Optional[BuilderFactory] = None,
        stdout: Optional[TextIO] = None,
    ) -> int:
        """Dispatch one verb and return the process exit code.

        VendorError propagates to the caller; main() turns it into exit code 1.
        """
        out = stdout or sys.stdout
        parser = _build_parser()
        ns = parser.parse_args(list(argv))

        json_logs = bool(ns.json_logs) or os.getenv('SITTERVENDOR_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        if ns.verb not in VERBS:
            if ns.verb:
                logger.warning('unknown verb %r', ns.verb)
            parser.print_help(out)
            return 0

        cfg = VendorConfig.from_env(
            logger=logger,
            dest=ns.dest,
            jobs=ns.jobs,
            output_format=ns.output_format,
            raw_host=ns.raw_host,
            go_module=ns.go_module,
        )
        runner: VendorRunner = (builder_factory or VendorBuilder)(cfg).build()

        if ns.verb == 'download':
            report = runner.download()
            if cfg.output_format == 'json':
                print(report.to_json(), file=out)
        elif ns.verb == 'check-updates':
            print(render_freshness(runner.check_updates(), fmt=cfg.output_format), file=out)
        elif ns.verb == 'tag-grammars':
            print(render_tags(runner.tag_grammars(), fmt=cfg.output_format), file=out)
        elif ns.verb == 'test':
            runner.test()
        return 0


def main() -> NoReturn:
    """Entry point for the `sittervendor` console script."""
    try:
        raise SystemExit(SitterVendor.run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except (VendorError, ValueError) as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('%s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
