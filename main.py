"""
Main entry point for the Tag Cloud builder.
Provides the command-line interface: `save` draws a cloud, `exclude` adds stop words.
"""

import argparse
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from cloud_filler import FontManager, WordsCloudFiller
from cloud_layouter import CloudLayouter
from cloud_renderer import TagCloudRenderer, parse_color, parse_image_format
from config import CLOUD_CONFIG, EXCLUSION_CONFIG, LAYOUT_CONFIG, OUTPUT_CONFIG
from geometry import Point
from result import Result
from spiral import SPIRALS, create_spiral
from word_counter import WordCounter
from word_excluder import WordExcluder


@dataclass(frozen=True)
class CloudConfig:
    """Validated settings for one `save` run."""

    center: Point
    input_path: str
    input_type: Optional[str]
    count: int
    font_name: str
    font_size: float
    file_name: str
    out_path: str
    color: str
    background_color: str
    image_format: str
    canvas_width: int
    canvas_height: int
    spiral: str
    step: int
    max_candidates: int
    excluded_words_path: str
    save_rectangles: bool
    page_range: Optional[Tuple[int, int]] = None


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Tag Cloud - Draw the most frequent words of a text as a cloud",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Draw the 70 most frequent words of a text file to ./Cloud.png
  python main.py save text.txt

  # Draw 100 words from a Word document in navy on light blue ellipses
  python main.py save report.docx -c 100 --color navy --back-color lightblue

  # Use an Archimedean spiral and a bigger canvas
  python main.py save text.txt --spiral archimedean --canvas-size 1600 1200

  # Only count words on pages 10 to 100 of a PDF
  python main.py save book.pdf --pdf-pages 10 100

  # Never draw these words
  python main.py exclude the and of
""",
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Minimal output"
    )
    parser.add_argument(
        "--excluded-words",
        type=str,
        default=EXCLUSION_CONFIG["excluded_words_path"],
        help="Path to the excluded words file",
    )
    subparsers = parser.add_subparsers(dest="command")

    save_parser = subparsers.add_parser("save", help="Save tag cloud.")
    save_parser.add_argument("input", type=str, help="Path to input file.")

    words_group = save_parser.add_argument_group("Word Options")
    words_group.add_argument(
        "--count",
        "-c",
        type=int,
        default=CLOUD_CONFIG["word_count"],
        help="Count of tags in cloud.",
    )
    words_group.add_argument(
        "--input-ext",
        type=str,
        choices=["auto", "txt", "docx", "pdf"],
        default="auto",
        help="Type of input file (detected from the extension by default).",
    )
    words_group.add_argument(
        "--pdf-pages",
        nargs=2,
        type=int,
        metavar=("START", "END"),
        help="Pages of a PDF to read, 1-based and inclusive (default: all).",
    )

    font_group = save_parser.add_argument_group("Font Options")
    font_group.add_argument(
        "--font-name",
        type=str,
        default=CLOUD_CONFIG["font_name"],
        help="Font file or font name known to the system.",
    )
    font_group.add_argument(
        "--font-size",
        type=float,
        default=CLOUD_CONFIG["font_size"],
        help="Font size of the most frequent word.",
    )

    output_group = save_parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--name", "-n", type=str, default=CLOUD_CONFIG["file_name"], help="File name."
    )
    output_group.add_argument(
        "--out-path", type=str, help="Path to output directory (default: current)."
    )
    output_group.add_argument(
        "--img-ext",
        type=str,
        default=CLOUD_CONFIG["image_format"],
        help="Extension of image to save.",
    )
    output_group.add_argument(
        "--color", type=str, default=CLOUD_CONFIG["color"], help="Name of color."
    )
    output_group.add_argument(
        "--back-color",
        type=str,
        default=CLOUD_CONFIG["background_color"],
        help="Name of background color.",
    )
    output_group.add_argument(
        "--canvas-size",
        nargs=2,
        type=int,
        metavar=("WIDTH", "HEIGHT"),
        default=[CLOUD_CONFIG["canvas_width"], CLOUD_CONFIG["canvas_height"]],
        help="Canvas size of the image (default: 1000x1000).",
    )
    output_group.add_argument(
        "--rectangles",
        action="store_true",
        help="Also save the bare layout rectangles as <name>-rectangles.<ext>",
    )

    layout_group = save_parser.add_argument_group("Layout Options")
    layout_group.add_argument(
        "--spiral",
        type=str,
        choices=sorted(SPIRALS),
        default=LAYOUT_CONFIG["spiral"],
        help="Spiral used to search positions.",
    )
    layout_group.add_argument(
        "--step",
        type=int,
        default=LAYOUT_CONFIG["spiral_step"],
        help="Distance in pixels between tried positions.",
    )
    layout_group.add_argument(
        "--max-candidates",
        type=int,
        default=LAYOUT_CONFIG["max_candidates"],
        help="Positions tried per word before giving up.",
    )

    exclude_parser = subparsers.add_parser("exclude", help="Exclude word from drawing.")
    exclude_parser.add_argument("words", nargs="+", type=str, help="Word to exclude.")

    return parser, parser.parse_args(argv)


def build_config(args) -> Result[CloudConfig]:
    """Validate `save` arguments, stopping at the first problem."""
    out_path = args.out_path or os.getcwd()
    width, height = args.canvas_size

    if args.count < 0:
        return Result.fail("Invalid count of rectangles.")
    if args.font_size <= 0:
        return Result.fail("Invalid font size")
    if not FontManager(args.font_name).is_available():
        return Result.fail("Can not parse font name.")
    if not os.path.isfile(args.input):
        return Result.fail("Input file does not exist.")
    if not parse_image_format(args.img_ext).is_success:
        return Result.fail("Invalid image format.")
    if not os.path.isdir(out_path):
        return Result.fail("Invalid output path.")
    for color in (args.color, args.back_color):
        parsed = parse_color(color)
        if not parsed.is_success:
            return parsed
    if width <= 0 or height <= 0:
        return Result.fail("Invalid canvas size.")
    if args.step <= 0:
        return Result.fail("Invalid spiral step.")
    if args.max_candidates <= 0:
        return Result.fail("Invalid maximum of candidates.")
    page_range = None
    if args.pdf_pages:
        start, end = args.pdf_pages
        if start < 1 or end < start:
            return Result.fail("Invalid page range.")
        page_range = (start - 1, end)

    return Result.ok(
        CloudConfig(
            center=Point(width // 2, height // 2),
            input_path=args.input,
            input_type=None if args.input_ext == "auto" else args.input_ext,
            count=args.count,
            font_name=args.font_name,
            font_size=args.font_size,
            file_name=args.name,
            out_path=out_path,
            color=args.color,
            background_color=args.back_color,
            image_format=args.img_ext,
            canvas_width=width,
            canvas_height=height,
            spiral=args.spiral,
            step=args.step,
            max_candidates=args.max_candidates,
            excluded_words_path=args.excluded_words,
            save_rectangles=args.rectangles,
            page_range=page_range,
        )
    )


def run_save(config: CloudConfig) -> Result[str]:
    """Count, lay out, render and save one tag cloud. Returns the image path."""
    counter = WordCounter(WordExcluder(config.excluded_words_path))
    font_manager = FontManager(config.font_name)
    layouter = CloudLayouter(
        config.center,
        spiral_factory=lambda: create_spiral(config.spiral, config.step),
        max_candidates=config.max_candidates,
    )
    filler = WordsCloudFiller(layouter, font_manager, config.font_size)
    renderer = TagCloudRenderer(
        config.canvas_width,
        config.canvas_height,
        config.color,
        config.background_color,
        config.image_format,
    )

    def save_rectangles(path: str) -> Result[str]:
        if not config.save_rectangles:
            return Result.ok(path)
        image = renderer.render_rectangles(layouter.rectangles, layouter.center)
        return renderer.save(
            image, config.out_path, f"{config.file_name}-rectangles"
        ).then(lambda _: path)

    return (
        Result.of(
            lambda: counter.analyze(
                config.input_path,
                config.input_type,
                limit=config.count,
                page_range=config.page_range,
            ),
            "Can't read input file",
        )
        .then(filler.fill)
        .then(
            lambda placed: renderer.render_and_save(
                placed, font_manager, config.out_path, config.file_name
            )
        )
        .then(save_rectangles)
        .refine_error("Can't build tag cloud")
    )


def run_exclude(words: List[str], path: str) -> Result[None]:
    excluder = WordExcluder(path, use_defaults=False)

    def add_all() -> None:
        for word in words:
            excluder.add_word(word)
        excluder.save()

    return Result.of(add_all, "Can't exclude words")


def main(argv: Optional[List[str]] = None) -> int:
    """Main function. Returns the process exit code."""
    parser, args = parse_arguments(argv)

    if args.quiet:
        OUTPUT_CONFIG["verbose"] = False
        OUTPUT_CONFIG["timing_info"] = False

    if args.command is None:
        parser.print_help()
        return 1

    start_time = time.time()

    if args.command == "exclude":
        outcome = run_exclude(args.words, args.excluded_words)
    else:
        outcome = build_config(args).then(run_save)

    if not outcome.is_success:
        print(f"Error: {outcome.error_message}", file=sys.stderr)
        return 1

    if OUTPUT_CONFIG["timing_info"]:
        print(f"Completed in {time.time() - start_time:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
