import logging
import sys
from argparse import ArgumentParser

from hwaddr.exceptions import MACAddressError
from hwaddr.log import init_log
from hwaddr.types.mac_address import MACAddress

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(prog="hwaddr")
    parser.add_argument("address", nargs="+")
    parser.add_argument(
        "-c",
        "--compact",
        action="store_true",
        help="print the raw octets as 12 hex digits",
    )
    parsed = parser.parse_args(argv)
    init_log()

    status = 0
    for address in parsed.address:
        try:
            mac = MACAddress.parse(address)
        except MACAddressError as err:
            log.error(f"'{address}' is not a valid MAC address: {err}")
            status = 1
            continue
        print(mac.to_bytes().hex() if parsed.compact else mac)
    return status


if __name__ == "__main__":
    sys.exit(main())
