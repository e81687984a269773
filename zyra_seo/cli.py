"""CLI entry point for SEO generation and Brand DNA training."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.status import Status
from rich.table import Table

from .brand_dna import analyze_brand_dna, learn_from_edit
from .client import AnthropicClient
from .engine import GenerationOptions, generate_seo_variants, generate_unified_seo
from .errors import InvalidInputError
from .frameworks import MARKETING_FRAMEWORKS, get_framework_by_id, recommend_framework
from .models import BrandDNA, BrandDNATrainingInput, SEOGenerationInput


def _read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def _write_json(data, path: Path | None, console: Console):
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if path is None:
        console.print_json(text)
    else:
        path.write_text(text + "\n", encoding="utf-8")
        console.print(f"Saved to [bold]{path}[/]")


def _load_input(args) -> SEOGenerationInput:
    seo_input = SEOGenerationInput.from_dict(_read_json(args.input))

    if args.brand_dna:
        seo_input = replace(seo_input, brand_dna=BrandDNA.from_dict(_read_json(args.brand_dna)))

    framework_id = getattr(args, "framework", None)
    if framework_id:
        framework = get_framework_by_id(framework_id)
        if framework is None:
            known = ", ".join(f.id for f in MARKETING_FRAMEWORKS)
            raise InvalidInputError(f"Unknown framework {framework_id!r} (known: {known})")
        seo_input = replace(seo_input, marketing_framework=framework)
    elif getattr(args, "auto_framework", False) and not seo_input.marketing_framework:
        seo_input = replace(
            seo_input,
            marketing_framework=recommend_framework(
                seo_input.category, seo_input.price_point, seo_input.target_audience
            ),
        )

    if getattr(args, "shopify_html", False):
        seo_input = replace(seo_input, shopify_html_formatting=True)
    return seo_input


async def _run_generate(args, console: Console, on_progress):
    seo_input = _load_input(args)
    on_progress(f"Generating SEO content for {seo_input.product_name}...")
    output = await generate_unified_seo(
        seo_input,
        AnthropicClient(),
        GenerationOptions(auto_select_framework=args.auto_framework),
    )
    return output.to_dict()


async def _run_variants(args, console: Console, on_progress):
    seo_input = _load_input(args)
    on_progress(f"Generating {min(args.count, 3)} variants for {seo_input.product_name}...")
    variants = await generate_seo_variants(
        seo_input, AnthropicClient(), args.count, concurrent=args.concurrent
    )

    table = Table(title="Variant predictions")
    for column in ("Variant", "Type", "SEO", "Conversion", "CTR %", "Lift %"):
        table.add_column(column)
    for v in variants:
        table.add_row(
            v.variant,
            v.type,
            f"{v.output.seo_score:.0f}",
            f"{v.output.conversion_score:.0f}",
            f"{v.expected_performance.click_through_rate}",
            f"{v.expected_performance.conversion_lift}",
        )
    console.print(table)
    return [v.to_dict() for v in variants]


async def _run_brand_dna(args, console: Console, on_progress):
    samples = [p.read_text(encoding="utf-8") for p in args.samples]
    on_progress(f"Analyzing {len(samples)} brand samples...")
    brand_dna = await analyze_brand_dna(
        BrandDNATrainingInput(sample_texts=samples, additional_guidelines=args.guidelines or ""),
        args.user_id,
        AnthropicClient(),
    )
    console.print(
        f"Brand DNA confidence: [bold]{brand_dna.confidence_score}[/] "
        f"({brand_dna.writing_style}, {brand_dna.vocabulary_level} vocabulary)"
    )
    return brand_dna.to_dict()


def _run_learn_edit(args, console: Console):
    brand_dna = BrandDNA.from_dict(_read_json(args.brand_dna))
    updated = learn_from_edit(
        brand_dna,
        args.original.read_text(encoding="utf-8"),
        args.edited.read_text(encoding="utf-8"),
    )
    args.brand_dna.write_text(
        json.dumps(updated.to_dict(), indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
    latest = updated.edit_patterns[-1]
    console.print(
        f"Recorded [bold]{latest.edit_type}[/] edit: {latest.learned_from}. "
        f"Confidence {brand_dna.confidence_score} -> {updated.confidence_score}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zyra-seo",
        description="Generate scored, brand-aware SEO content for product listings.",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_input_args(p):
        p.add_argument("--input", type=Path, required=True, help="Product input JSON file")
        p.add_argument("--brand-dna", type=Path, default=None, help="Brand DNA JSON file")
        p.add_argument("--output", type=Path, default=None, help="Output JSON path (default: stdout)")

    generate = sub.add_parser("generate", help="Generate SEO content for one product")
    add_input_args(generate)
    frameworks = generate.add_mutually_exclusive_group()
    frameworks.add_argument(
        "--framework",
        choices=[f.id for f in MARKETING_FRAMEWORKS],
        default=None,
        help="Marketing framework id",
    )
    frameworks.add_argument(
        "--auto-framework", action="store_true", help="Recommend a framework from the product attributes"
    )
    generate.add_argument("--shopify-html", action="store_true", help="Format the description as Shopify HTML")

    variants = sub.add_parser("variants", help="Generate A/B/C variants")
    add_input_args(variants)
    variants.add_argument("--count", type=int, default=3, help="Number of variants (max 3)")
    variants.add_argument("--concurrent", action="store_true", help="Run variant calls concurrently")

    brand = sub.add_parser("brand-dna", help="Build a Brand DNA profile from sample texts")
    brand.add_argument("--user-id", required=True)
    brand.add_argument("--samples", type=Path, nargs="+", required=True, help="Sample text files")
    brand.add_argument("--guidelines", default=None, help="Additional brand guidelines")
    brand.add_argument("--output", type=Path, default=None, help="Output JSON path (default: stdout)")

    learn = sub.add_parser("learn-edit", help="Record a user edit in a Brand DNA file")
    learn.add_argument("--brand-dna", type=Path, required=True)
    learn.add_argument("--original", type=Path, required=True, help="File with the generated text")
    learn.add_argument("--edited", type=Path, required=True, help="File with the user's edited text")

    return parser


def main(argv: list[str] | None = None):
    load_dotenv()

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = Console()

    if args.command == "learn-edit":
        try:
            _run_learn_edit(args, console)
        except Exception as e:
            console.print(f"\n[bold red]Error:[/] {e}\n")
            sys.exit(1)
        return

    runners = {
        "generate": _run_generate,
        "variants": _run_variants,
        "brand-dna": _run_brand_dna,
    }

    status = Status("", console=console)
    status.start()

    def on_progress(msg: str):
        status.update(f"[bold cyan]{msg}[/]")

    try:
        result = asyncio.run(runners[args.command](args, console, on_progress))
        status.stop()
        _write_json(result, args.output, console)
    except KeyboardInterrupt:
        status.stop()
        console.print("\n[yellow]Cancelled.[/]")
        sys.exit(1)
    except Exception as e:
        status.stop()
        console.print(f"\n[bold red]Error:[/] {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
