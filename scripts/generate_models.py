#!/usr/bin/env python
# ============================================================================
# MODEL GENERATION SCRIPT
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# PURPOSE: Generate entity and repository classes from a MySQL schema
# USAGE:
#   python scripts/generate_models.py --schema shop               # Write model/model.py
#   python scripts/generate_models.py --schema shop --stdout      # Print source
#   python scripts/generate_models.py --schema shop -o app/db.py  # Custom output
# ============================================================================

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pymysql

from core.config import Defaults, get_defaults
from core.errors import GeneratorError
from core.logging import ComponentType, configure_logging, get_logger
from infrastructure import MySQLConnectionFactory
from services import ModelGenerator

logger = get_logger("generate_models", ComponentType.CLI)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate entity and repository classes from a MySQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/generate_models.py --schema shop
  python scripts/generate_models.py --schema shop --stdout
  python scripts/generate_models.py --schema shop --skip-unsupported

Environment Variables:
  MYSQL_HOST                  Database host (default: localhost)
  MYSQL_PORT                  Database port (default: 3306)
  MYSQL_USER                  Database user (default: root)
  MYSQL_PASSWORD              Database password
  MYSQL_DATABASE              Database to connect to (default schema)
  MODELGEN_SCHEMA             Schema to introspect
  MODELGEN_OUTPUT             Output file (default: model/model.py)
  MODELGEN_LINE_LENGTH        Formatter line length (default: 88)
  MODELGEN_SKIP_UNSUPPORTED   Skip unsupported columns (default: false)
  MODELGEN_MANY_TO_MANY       Detect link tables (default: true)
  LOG_FORMAT                  "json" for one JSON object per log line
        """
    )
    parser.add_argument("--schema", type=str, help="Schema to introspect")
    parser.add_argument("--output", "-o", type=str, help="Output file path")
    parser.add_argument("--host", type=str, help="Database host")
    parser.add_argument("--port", type=int, help="Database port")
    parser.add_argument("--user", type=str, help="Database user")
    parser.add_argument("--password", type=str, help="Database password")
    parser.add_argument(
        "--skip-unsupported",
        action="store_true",
        default=None,
        help="Leave unsupported columns out instead of failing"
    )
    parser.add_argument(
        "--no-many-to-many",
        action="store_false",
        dest="many_to_many",
        default=None,
        help="Do not generate finders through link tables"
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated source instead of writing a file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines"
    )
    return parser


def resolve_defaults(args: argparse.Namespace, base: Optional[Defaults] = None) -> Defaults:
    """Layer CLI flags over environment defaults."""
    defaults = (base or get_defaults()).with_overrides(
        host=args.host,
        port=args.port,
        user=args.user,
        password=args.password,
        schema=args.schema,
        output_path=args.output,
        skip_unsupported_columns=args.skip_unsupported,
        detect_many_to_many=args.many_to_many,
    )
    # Connect to the introspected schema when no database is configured
    if not defaults.connection.database and defaults.schema:
        defaults = defaults.with_overrides(database=defaults.schema)
    return defaults


def write_output(source: str, path: str) -> Path:
    """Write source to path, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(source, encoding="utf-8")
    return target


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(
        level="DEBUG" if args.verbose else "INFO",
        json_output=args.json_logs,
    )

    try:
        defaults = resolve_defaults(args)
        if not defaults.schema:
            logger.error("No schema given (use --schema or MODELGEN_SCHEMA)")
            return 1

        factory = MySQLConnectionFactory(defaults.connection)
        with factory.connection() as conn:
            generator = ModelGenerator(conn, defaults.schema, defaults=defaults)
            source = generator.generate()
    except GeneratorError as e:
        logger.error(f"Generation failed: {e}")
        return 1
    except (pymysql.MySQLError, ValueError) as e:
        logger.error(f"Connection failed: {e}")
        return 1

    if args.stdout:
        sys.stdout.write(source)
        return 0

    target = write_output(source, defaults.generation.output_path)
    logger.info(f"Wrote {len(generator.tables)} entities to {target}")
    if generator.introspector.skipped_columns:
        logger.warning(f"Skipped columns: {', '.join(generator.introspector.skipped_columns)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
