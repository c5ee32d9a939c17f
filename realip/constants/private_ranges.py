from typing import Tuple

# https://en.wikipedia.org/wiki/Private_network
# https://en.wikipedia.org/wiki/Link-local_address
PRIVATE_CIDR_BLOCKS: Tuple[str, ...] = (
    "127.0.0.0/8",     # localhost
    "10.0.0.0/8",      # 24-bit block
    "172.16.0.0/12",   # 20-bit block
    "192.168.0.0/16",  # 16-bit block
    "169.254.0.0/16",  # link local address
    "::1/128",         # localhost IPv6
    "fc00::/7",        # unique local address IPv6
    "fe80::/10",       # link local address IPv6
)
