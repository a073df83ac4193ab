"""
Filter Lab
One filter per line on the sample images, one output file per filter.
"""

import logging
import sys


def run(args):
    """Run the whole filter pipeline and print a short report."""
    from models.run_config import RunConfig
    from filters.pipeline import run_all

    if args and args[0] == '--help':
        print("Usage: python main.py [--synthetic] [output_dir]")
        print("       images are read from images/logo.png and images/photo.jpg")
        sys.exit(0)

    synthetic = '--synthetic' in args
    positional = [a for a in args if not a.startswith('--')]
    config = RunConfig(synthetic=synthetic)
    if positional:
        config = RunConfig(synthetic=synthetic, output_dir=positional[0])

    if synthetic:
        print("Generating sample images...")
    else:
        print(f"Loading: {config.logo_path}, {config.photo_path}")

    results = run_all(config)

    print("\n=== Results ===")
    for r in results:
        quality = f"PSNR {r.psnr:6.2f} dB" if r.psnr is not None else ""
        print(f"{r.name:<26} {r.shape[1]:>4}x{r.shape[0]:<4} {r.elapsed_ms:8.2f} ms  {quality}")
    print(f"\nSaved {len(results)} images to {config.output_dir}/")


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    run(sys.argv[1:])


if __name__ == '__main__':
    main()
