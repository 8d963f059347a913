"""
VoxBuilder - Voxel Model MCP Server
===================================

Main entry point for the VoxBuilder server.

Usage:
    voxbuilder [--transport stdio|sse|streamable-http] [--log-level LEVEL]

Environment:
    VOXBUILDER_TRANSPORT    Default for --transport
    VOXBUILDER_LOG_LEVEL    Default for --log-level
"""

import os
import sys
import logging
import argparse

from voxbuilder import __version__
from voxbuilder.core.registry import ModelRegistry
from voxbuilder.server import create_server, SERVER_NAME


logger = logging.getLogger(__name__)

TRANSPORTS = ('stdio', 'sse', 'streamable-http')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='voxbuilder',
        description='VoxBuilder - build MagicaVoxel models over MCP',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Tools:
  create, setVoxels, getVoxels, exportVox

Examples:
  %(prog)s                          Serve over stdio
  %(prog)s --transport sse          Serve over HTTP with SSE
  %(prog)s --log-level INFO         Log project activity to stderr
        """
    )

    parser.add_argument(
        '--transport',
        choices=TRANSPORTS,
        default=os.environ.get('VOXBUILDER_TRANSPORT', 'stdio'),
        help='MCP transport to serve on (default: stdio)'
    )

    parser.add_argument(
        '--name',
        default=SERVER_NAME,
        help=f'Server name announced to clients (default: {SERVER_NAME})'
    )

    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get('VOXBUILDER_LOG_LEVEL', 'WARNING').upper(),
        help='Logging level (default: WARNING)'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging (same as --log-level DEBUG)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)
    # Defaults from the environment bypass the choices check
    if args.transport not in TRANSPORTS:
        parser.error(f"invalid transport: {args.transport!r}")
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level!r}")
    if args.debug:
        args.log_level = 'DEBUG'
    return args


def configure_logging(level: str):
    """Send logs to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv=None):
    """Main application entry point."""
    args = parse_arguments(argv)
    configure_logging(args.log_level)

    registry = ModelRegistry()
    server = create_server(registry, server_name=args.name)

    logger.info("Starting %s %s on %s", args.name, __version__, args.transport)
    server.run(transport=args.transport)
    return 0


if __name__ == "__main__":
    sys.exit(main())
