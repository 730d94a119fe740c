import logging

from .disassembler import listing


logger = logging.getLogger(__name__)


class UnreadableRom(Exception):
    pass


def load_rom(rom_path):
    try:
        with open(rom_path, "rb") as f:
            code = f.read()
    except OSError as e:
        raise UnreadableRom(f"{rom_path}: {e.strerror or e}") from e

    logger.debug("read %d bytes from %s", len(code), rom_path)
    return code


def write_listing(code, out):
    count = 0
    for line in listing(code):
        out.write(line + "\n")
        count += 1

    # the header is not a record
    logger.debug("wrote %d records", count - 1)


def dump(rom_path, out):
    """Write the annotated listing of the rom at rom_path to the text stream out."""
    write_listing(load_rom(rom_path), out)
