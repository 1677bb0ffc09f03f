"""
MiniWorks SysEx file writer.

Writes Program and Configuration objects to .syx files as Program Dumps
and All Dumps.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

import mido

from miniworks.formats.configuration_codec import encode_configuration
from miniworks.formats.program_codec import encode_program
from miniworks.midi import to_mido_message
from miniworks.models.configuration import Configuration
from miniworks.models.program import Program
from miniworks.utils.checksum import ChecksumMode
from miniworks.utils.validation import validate_device_id

Item = Union[Program, Configuration]


class MiniWorksWriter:
    """
    Writer for MiniWorks SysEx files.

    Programs become 37-byte Program Dumps, configurations 593-byte All
    Dumps, in the order given.

    Example:
        program = Program(number=3, cutoff=90)
        MiniWorksWriter.write(program, "p4.syx")
    """

    def __init__(
        self,
        device_id: Optional[int] = None,
        mode: ChecksumMode = ChecksumMode.MASK7,
        bulk: bool = False,
    ):
        """
        Initialize writer.

        Args:
            device_id: Device ID byte (0-126); None uses 0 for programs
                and the configuration's own ID for All Dumps
            mode: Checksum algorithm
            bulk: Write programs as Program Bulk Dumps
        """
        self.device_id = None if device_id is None else validate_device_id(device_id)
        self.mode = mode
        self.bulk = bulk

    @classmethod
    def write(
        cls,
        items: Union[Item, Iterable[Item]],
        filepath: Union[str, Path],
        device_id: Optional[int] = None,
        mode: ChecksumMode = ChecksumMode.MASK7,
        bulk: bool = False,
    ) -> None:
        """
        Write programs and/or configurations to a SysEx file.

        Args:
            items: A Program, a Configuration, or an iterable of them
            filepath: Output file path
            device_id: Device ID byte
            mode: Checksum algorithm
            bulk: Write programs as Program Bulk Dumps
        """
        writer = cls(device_id, mode, bulk)
        messages = [to_mido_message(raw) for raw in writer.to_messages(items)]

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        mido.write_syx_file(str(filepath), messages)

    def to_messages(self, items: Union[Item, Iterable[Item]]) -> List[bytes]:
        """
        Encode each item as one complete SysEx message.

        Raises:
            TypeError: If an item is neither a Program nor a Configuration
        """
        if isinstance(items, (Program, Configuration)):
            items = [items]

        messages = []
        for item in items:
            if isinstance(item, Program):
                device_id = 0 if self.device_id is None else self.device_id
                messages.append(encode_program(item, device_id, self.mode, self.bulk))
            elif isinstance(item, Configuration):
                messages.append(encode_configuration(item, self.device_id, self.mode))
            else:
                raise TypeError(f"Cannot write {type(item).__name__} as MiniWorks SysEx")
        return messages

    def to_bytes(self, items: Union[Item, Iterable[Item]]) -> bytes:
        """
        Convert items to a SysEx byte stream.

        Returns:
            Concatenated messages, as they would appear in a .syx file
        """
        return b"".join(self.to_messages(items))
