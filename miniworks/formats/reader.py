"""
MiniWorks SysEx file reader.

Reads .syx files holding any mix of Program Dumps, All Dumps and dump
requests and decodes them to Program and Configuration objects.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import mido

from miniworks.formats.configuration_codec import decode_configuration
from miniworks.formats.program_codec import decode_program
from miniworks.formats.sysex_parser import (
    MessageType,
    ParseFailure,
    SysExMessage,
    SysExParser,
)
from miniworks.midi import from_mido_message
from miniworks.models.configuration import Configuration
from miniworks.models.program import Program
from miniworks.utils.checksum import ChecksumMode


@dataclass
class SyxContents:
    """
    Everything decoded from one .syx file.

    Attributes:
        programs: Programs from Program Dumps and Program Bulk Dumps
        configurations: Configurations from All Dumps
        requests: Dump requests found in the stream
        errors: Messages that failed validation
    """

    programs: List[Program] = field(default_factory=list)
    configurations: List[Configuration] = field(default_factory=list)
    requests: List[SysExMessage] = field(default_factory=list)
    errors: List[ParseFailure] = field(default_factory=list)

    @property
    def configuration(self) -> Optional[Configuration]:
        """First All Dump in the file, if any."""
        return self.configurations[0] if self.configurations else None

    @property
    def all_programs(self) -> List[Program]:
        """Single programs followed by every program of every All Dump."""
        programs = list(self.programs)
        for configuration in self.configurations:
            programs.extend(configuration.programs)
        return programs

    @property
    def is_empty(self) -> bool:
        return not (self.programs or self.configurations or self.requests)


class MiniWorksReader:
    """
    Reader for MiniWorks SysEx files.

    Example:
        contents = MiniWorksReader.read("bank.syx")
        for program in contents.all_programs:
            print(program.display_name, program.cutoff)
    """

    def __init__(
        self, mode: ChecksumMode = ChecksumMode.MASK7, device_id: Optional[int] = None
    ):
        self.mode = mode
        self.device_id = device_id
        self.parser = SysExParser(mode, device_id)

    @classmethod
    def read(
        cls,
        filepath: Union[str, Path],
        mode: ChecksumMode = ChecksumMode.MASK7,
        device_id: Optional[int] = None,
    ) -> SyxContents:
        """
        Read a MiniWorks SysEx file.

        Args:
            filepath: Path to .syx file (binary or hex text)
            mode: Checksum algorithm
            device_id: Expected device ID, or None to accept any

        Returns:
            Decoded file contents
        """
        reader = cls(mode, device_id)
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> SyxContents:
        """
        Parse a SysEx file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        raw_messages = [
            from_mido_message(msg) for msg in mido.read_syx_file(str(filepath)) if msg.type == "sysex"
        ]
        return self._build(self.parser.parse_messages(raw_messages))

    def parse_bytes(self, data: bytes) -> SyxContents:
        """
        Parse SysEx data from bytes.

        Args:
            data: Raw SysEx stream
        """
        return self._build(self.parser.parse_bytes(data))

    def _build(self, messages: List[SysExMessage]) -> SyxContents:
        contents = SyxContents(errors=list(self.parser.errors))

        for msg in messages:
            if msg.is_request:
                contents.requests.append(msg)
            elif msg.message_type == MessageType.ALL_DUMP:
                contents.configurations.append(decode_configuration(msg.raw, self.mode))
            else:
                contents.programs.append(decode_program(msg.raw, self.mode))

        return contents
