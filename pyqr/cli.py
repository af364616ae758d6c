"""
Interactive console entry point.

Prompts for the text and options, optionally walks through each pipeline
step, then prints the symbol and saves it as a PNG.
"""

from . import config
from .bitstream import build_data_codewords, make_data_bitstream
from .capacity import choose_version
from .encoder import encode, validate_options
from .errors import QRError
from .interleave import interleave, split_blocks
from .render import print_matrix, save_image
from .segment import make_segment


def ask(prompt: str, default: str = "") -> str:
    return input(prompt).strip() or default


def explain_steps(text: str, ecl, min_version: int, max_version: int):
    """
    Print the intermediate results of the encoding pipeline.

    @param text: Input text
    @param ecl: Error-correction level
    @param min_version: Smallest version to consider
    @param max_version: Largest version to consider
    """
    segment = make_segment(text)
    print(f"\nStep 1: Segment ({segment.mode.name.lower()} mode, {segment.num_chars} characters).")
    print(segment.bits)

    version = choose_version(segment, ecl, min_version, max_version)
    print(f"\nStep 2: Version {version}-{ecl.name} selected.")

    print("\nStep 3: Data bitstream.")
    print(make_data_bitstream(segment, version, ecl))

    data = build_data_codewords(segment, version, ecl)
    print("\nStep 4: Data codewords (bytes).")
    print(list(data))

    blocks = split_blocks(data, version, ecl)
    print(f"\nStep 5: Error correction codewords ({len(blocks)} blocks).")
    for i, block in enumerate(blocks):
        print(f"  block {i}: {list(block.error_correction)}")

    print("\nStep 6: Interleaved codewords.")
    print(list(interleave(blocks)))


def main():
    """
    Main entry point for the QR code generator.

    1. Text input collection
    2. Error-correction level selection
    3. Optional step-by-step walkthrough
    4. Encoding and mask selection
    5. Console and PNG output
    """
    text = input("Enter text to encode: ")
    ec_level = ask(f"Error correction level (L/M/Q/H) [{config.DEFAULT_EC_LEVEL}]: ",
                   config.DEFAULT_EC_LEVEL)
    explain = ask("Would you like to see the step-by-step of the QR code's creation? (y/n): ").lower() == "y"
    frame = ask("Would you like to add a frame? (y/n): ").lower() == "y"

    try:
        ecl, min_version, max_version, _ = validate_options(
            ec_level, config.MIN_VERSION, config.MAX_VERSION, config.DEFAULT_MASK)
        if explain:
            explain_steps(text, ecl, min_version, max_version)
        qr = encode(text, ecl, min_version, max_version)
    except QRError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"\nUsing Version {qr.version}-{qr.ec_level.name} QR Code ({qr.size}x{qr.size})!")
    print(f"Best mask: {qr.mask}")
    print_matrix(qr, border=config.DEFAULT_BORDER, frame=frame)

    save_image(qr, config.DEFAULT_IMAGE_NAME, frame=frame)
    print(f"\nQR code saved as: {config.DEFAULT_IMAGE_NAME}!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
