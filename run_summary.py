# Summarize the clipboard (or a file) and copy the result back
import argparse
import sys

from textsum.commands import text_summary, text_summary_as_bullet
from textsum.config import CompressionRate, SplitStrategy, SummaryConfig, resolve_model, settings
from textsum.documents import DocumentProcessor
from textsum.errors import TextSumError
from textsum.llm import OpenAIClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize long text from the clipboard or a file")
    parser.add_argument("--file", "-f", help="Read text from a TXT/MD/PDF/DOCX file")
    parser.add_argument("--nch", type=int, default=settings.summary.nch, help="Characters per block")
    parser.add_argument(
        "--compression",
        choices=[c.value for c in CompressionRate],
        default=CompressionRate.MIDDLE.value,
        help="Summary size relative to the block size",
    )
    parser.add_argument("--summary-block", type=int, help="Target characters per block summary")
    parser.add_argument("--model", default=settings.summary.model, help="Model id or preset (gpt-3.5, gpt-4)")
    parser.add_argument("--temperature", type=float, default=settings.summary.temperature)
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in SplitStrategy],
        default=SplitStrategy.EVEN.value,
    )
    parser.add_argument("--final", action="store_true", help="Summarize the block summaries once more")
    parser.add_argument("--bullets", type=int, help="Bullet-point summary with N points instead")
    parser.add_argument("--return-text", action="store_true", help="Print block summaries, skip the clipboard")
    parser.add_argument("--quiet", "-q", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    client = OpenAIClient(
        api_key=settings.openai.api_key,
        base_url=settings.openai.base_url,
        model=settings.openai.model,
        timeout=settings.openai.timeout,
    )

    text = None
    try:
        if args.file:
            text = DocumentProcessor().extract_file(args.file).text

        if args.bullets:
            result = text_summary_as_bullet(
                text,
                client=client,
                bullet_points=args.bullets,
                model=resolve_model(args.model),
                temperature=args.temperature,
                verbose=not args.quiet,
            )
            print(result)
            return 0

        config = SummaryConfig(
            nch=args.nch,
            summary_block=args.summary_block,
            compression=args.compression,
            model=args.model,
            temperature=args.temperature,
            strategy=args.strategy,
            final_reduction=args.final,
            verbose=not args.quiet,
            return_text=args.return_text,
        )
        result = text_summary(text, client=client, config=config)
    except (TextSumError, ValueError, OSError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if isinstance(result, list):
        print("\n\n".join(result))
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
