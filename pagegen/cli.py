"""Command-line interface for pagegen."""

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .assets import describe_asset
from .errors import AssetReadError, CompressionError, RenderError
from .io_utils import read_yaml, warn
from .landing import build_landing
from .models import SiteConfig
from .page import assemble
from .render import open_sink, render
from .util_fs import staged_output


def _load_site_config(path: Path) -> SiteConfig:
    if not path.exists():
        raise SystemExit(f"Site config not found: {path}")
    try:
        data = read_yaml(path) or {}
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping with 'page' and 'content'.")
    try:
        return SiteConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid site config in {path}: {exc}") from exc


def _resolve_asset(args: argparse.Namespace, config: SiteConfig, config_path: Path) -> Optional[Path]:
    if args.asset:
        return Path(args.asset)
    if config.asset:
        # Relative asset paths in YAML are relative to the YAML file.
        return config_path.parent / config.asset
    return None


def _bundle_size(asset_path: Optional[Path]) -> Optional[str]:
    if asset_path is None:
        return None
    try:
        return describe_asset(asset_path).human_readable
    except (AssetReadError, CompressionError) as exc:
        raise SystemExit(f"Could not size asset: {exc}") from exc


def _handle_build(args: argparse.Namespace) -> None:
    config_path = Path(args.site)
    config = _load_site_config(config_path)
    bundle_size = _bundle_size(_resolve_asset(args, config, config_path))

    page = assemble(build_landing(config.content, bundle_size=bundle_size), config.page)

    output_path = Path(args.out)
    try:
        # The page only replaces output_path once it is fully written.
        with staged_output(output_path) as staging_path:
            with open_sink(staging_path) as sink:
                written = render(page, sink)
    except (RenderError, OSError) as exc:
        warn(f"Render failed for {output_path}: {exc}")
        raise SystemExit(1) from exc

    print(f"Wrote {output_path} ({written} bytes).")


def _handle_size(args: argparse.Namespace) -> None:
    try:
        size = describe_asset(args.path)
    except (AssetReadError, CompressionError) as exc:
        warn(str(exc))
        raise SystemExit(1) from exc
    print(f"{size.compressed_size} {size.human_readable}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagegen",
        description="Declarative page rendering utilities",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="pagegen 0.1.0",
        help="Show the pagegen version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command")

    build_cmd = subparsers.add_parser(
        "build",
        help="Render the landing page.",
        description="Render the landing page described by a site YAML file.",
    )
    build_cmd.add_argument(
        "--site",
        default="config/site.yaml",
        help="Path to the site YAML file.",
    )
    build_cmd.add_argument(
        "--asset",
        default=None,
        help="Bundle to size; overrides the 'asset' entry of the site file.",
    )
    build_cmd.add_argument(
        "--out",
        required=True,
        help="Path of the HTML file to write.",
    )
    build_cmd.set_defaults(func=_handle_build)

    size_cmd = subparsers.add_parser(
        "size",
        help="Report the compressed size of an asset.",
        description="Gzip an asset at maximum level and print its size.",
    )
    size_cmd.add_argument("path", help="Asset to compress.")
    size_cmd.set_defaults(func=_handle_size)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
