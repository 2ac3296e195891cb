#!/usr/bin/env python3
"""
invoicekit management CLI.

Usage:
    python manage.py serve                  Start the API server
    python manage.py migrate                Create or upgrade the local schema
    python manage.py render <invoice-id>    Render a stored invoice to PDF
    python manage.py debug-grid             Write the calibration grid PDF
"""

import argparse
import asyncio
import sys
from pathlib import Path

from invoicekit.config import configure_logging, get_settings
from invoicekit.core.exceptions import InvoiceKitError


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "invoicekit.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


async def _migrate() -> dict:
    from invoicekit.infrastructure.storage.sqlite import close_pool, get_pool
    from invoicekit.infrastructure.storage.sqlite.migrations import get_migration_status

    pool = get_pool()
    try:
        await pool.initialize()
    finally:
        await close_pool()
    return await get_migration_status(pool.db_path)


def cmd_migrate(args: argparse.Namespace) -> None:
    """Establish the local schema and print the migration status."""
    status = asyncio.run(_migrate())
    print(f"Database: {get_settings().storage.db_path}")
    print(f"Applied:  {', '.join(status['applied_migrations']) or '-'}")
    print(f"Pending:  {', '.join(status['pending_migrations']) or '-'}")


async def _render(invoice_id: str, output_dir: Path | None) -> Path:
    from invoicekit.application.use_cases import RenderInvoicePdfUseCase
    from invoicekit.infrastructure.storage.sqlite import close_pool

    use_case = RenderInvoicePdfUseCase()
    try:
        result = await use_case.execute(invoice_id)
    finally:
        await close_pool()
    return use_case.write(result, output_dir)


def cmd_render(args: argparse.Namespace) -> None:
    """Render one invoice through the dual-path store."""
    path = asyncio.run(_render(args.invoice_id, args.output_dir))
    print(f"Wrote {path}")


def cmd_debug_grid(args: argparse.Namespace) -> None:
    """Write the calibration grid PDF."""
    from invoicekit.application.use_cases import RenderInvoicePdfUseCase

    result = RenderInvoicePdfUseCase().debug_grid()
    output = Path(args.output or get_settings().pdf.output_dir / result.filename)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result.pdf_bytes)
    print(f"Wrote {output}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="invoicekit management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    settings = get_settings()

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=settings.api.host, help="Bind host")
    p_serve.add_argument("--port", type=int, default=settings.api.port, help="Bind port")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Create or upgrade the local schema")
    p_migrate.set_defaults(func=cmd_migrate)

    # render
    p_render = sub.add_parser("render", help="Render a stored invoice to PDF")
    p_render.add_argument("invoice_id", help="Invoice id")
    p_render.add_argument("-o", "--output-dir", type=Path, default=None, help="Output directory")
    p_render.set_defaults(func=cmd_render)

    # debug-grid
    p_grid = sub.add_parser("debug-grid", help="Write the calibration grid PDF")
    p_grid.add_argument("-o", "--output", type=Path, default=None, help="Output file")
    p_grid.set_defaults(func=cmd_debug_grid)

    args = parser.parse_args()
    configure_logging()

    try:
        args.func(args)
    except InvoiceKitError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
