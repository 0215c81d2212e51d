#!/usr/bin/env python3
"""
Calculate a position weight matrix from aligned protein sequences in a Fasta file and write it as a TSV table.
"""
import argparse
import logging
import os
import sys

from sequence_pwm.fasta import read_fasta
from sequence_pwm.pwm import AlignmentLengthError, build_matrix
from sequence_pwm.tsv import write_matrix

class UsageParser(argparse.ArgumentParser):
    """ArgumentParser exiting with status 1 on bad arguments"""
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")

def main(argv=None):
    """
    Main
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    if not os.path.exists(args.fasta):
        print(f"Error: File '{args.fasta}' does not exist.", file=sys.stderr)
        sys.exit(1)

    try:
        sequences = read_fasta(args.fasta)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Error reading FASTA file: {err}", file=sys.stderr)
        sys.exit(1)

    try:
        matrix = build_matrix(sequences)
    except AlignmentLengthError as err:
        print(f"Error building PWM: {err}", file=sys.stderr)
        sys.exit(1)

    try:
        write_matrix(matrix, args.output)
    except OSError as err:
        print(f"Error writing to TSV file: {err}", file=sys.stderr)
        sys.exit(1)

    print(f"PWM written to '{args.output}'", file=sys.stdout)

def arg_parser():
    """Argument parser"""
    parser = UsageParser(description=__doc__,
                         formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    parser.add_argument('fasta', metavar='fasta_file_path', help="Aligned protein Fasta file")
    parser.add_argument('output', metavar='output_tsv_path', help="Output TSV file")

    return parser

def parse_args(argv=None):
    """Process arguments"""
    parser = arg_parser()
    return parser.parse_args(argv)

if __name__ == "__main__":
    main()
