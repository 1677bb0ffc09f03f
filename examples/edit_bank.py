#!/usr/bin/env python3
"""
Example: Edit programs in an All Dump

Shows how to read a bank, change programs, and write it back.
"""

import sys

sys.path.insert(0, "..")

from miniworks.formats.reader import MiniWorksReader
from miniworks.formats.writer import MiniWorksWriter
from miniworks.models.enums import LFOShape, ModulationSource


def darken_bank(input_file: str, output_file: str, amount: int = 20):
    """
    Lower the cutoff of every user program.

    Args:
        input_file: Path to an All Dump .syx file
        output_file: Path for the edited bank
        amount: Cutoff reduction (0-127)
    """
    contents = MiniWorksReader.read(input_file)
    config = contents.configuration
    if config is None:
        raise ValueError(f"No All Dump in {input_file}")

    for program in config.programs:
        program.cutoff = max(0, program.cutoff - amount)

    MiniWorksWriter.write(config, output_file)
    print(f"Saved to: {output_file}")


def copy_with_wobble(input_file: str, output_file: str, source: int, target: int):
    """
    Copy a program to another slot and add LFO cutoff modulation.

    Args:
        input_file: Path to an All Dump .syx file
        output_file: Path for the edited bank
        source: Slot to copy from (0-19)
        target: Slot to copy to (0-19)
    """
    config = MiniWorksReader.read(input_file).configuration
    if config is None:
        raise ValueError(f"No All Dump in {input_file}")

    program = config.program(source).copy()
    program.lfo_shape = LFOShape.TRIANGLE
    program.lfo_speed = 30
    program.cutoff_mod_source = ModulationSource.LFO
    program.cutoff_mod_amount = 100
    config.update_program(program, target)

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"  {error}")
        return

    MiniWorksWriter.write(config, output_file)
    print(f"P.{source + 1} copied to P.{target + 1} with LFO wobble: {output_file}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python edit_bank.py <bank.syx> <output.syx>")
        sys.exit(1)

    darken_bank(sys.argv[1], sys.argv[2])
