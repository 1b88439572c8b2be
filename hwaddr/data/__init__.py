from .mac_column import MACAddressType
