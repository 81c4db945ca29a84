from enum import Enum, IntEnum
from typing import Union

from .errors import BadChainIdError


class SupportedChain(IntEnum):
    """
    Chains supported by Bungee, valued by their chain ID.
    List from https://public-backend.bungee.exchange/api/v1/supported-chains

    The wire form is always the numeric id; display_name is for humans only.
    """
    ETHEREUM = 1
    OPTIMISM = 10
    BNB = 56
    GNOSIS = 100
    UNICHAIN = 130
    POLYGON = 137
    SONIC = 146
    ZKSYNC_ERA = 324
    WORLD_CHAIN = 480
    HYPER_EVM = 999
    POLYGON_ZKEVM = 1101
    SEI = 1329
    SONEIUM = 1868
    ABSTRACT = 2741
    MANTLE = 5000
    BASE = 8453
    PLASMA = 9745
    MODE = 34443
    ARBITRUM = 42161
    AVALANCHE = 43114
    INK = 57073
    LINEA = 59144
    BERACHAIN = 80094
    BLAST = 81457
    SOLANA = 89999
    PLUME = 98866
    SCROLL = 534352
    KATANA = 747474
    TRON = 728126428

    def __str__(self):
        return self.to_wire()

    @property
    def display_name(self) -> str:
        return _CHAIN_DISPLAY_NAMES[self]

    def to_wire(self) -> str:
        return str(int(self))

    @classmethod
    def from_str(cls, raw: str) -> 'SupportedChain':
        if not isinstance(raw, str) or not raw.isascii() or not raw.isdigit():
            raise BadChainIdError(raw, f'Unable to parse chain ID: {raw!r}')
        try:
            return cls(int(raw))
        except ValueError:
            raise BadChainIdError(raw) from None

    @classmethod
    def from_wire(cls, value: Union[int, str]) -> 'SupportedChain':
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise BadChainIdError(value) from None
        raise BadChainIdError(value)


_CHAIN_DISPLAY_NAMES = {
    SupportedChain.ETHEREUM: 'Ethereum',
    SupportedChain.OPTIMISM: 'Optimism',
    SupportedChain.BNB: 'BNB',
    SupportedChain.GNOSIS: 'Gnosis',
    SupportedChain.UNICHAIN: 'Unichain',
    SupportedChain.POLYGON: 'Polygon',
    SupportedChain.SONIC: 'Sonic',
    SupportedChain.ZKSYNC_ERA: 'zkSync Era',
    SupportedChain.WORLD_CHAIN: 'World Chain',
    SupportedChain.HYPER_EVM: 'HyperEVM',
    SupportedChain.POLYGON_ZKEVM: 'Polygon zkEVM',
    SupportedChain.SEI: 'Sei',
    SupportedChain.SONEIUM: 'Soneium',
    SupportedChain.ABSTRACT: 'Abstract',
    SupportedChain.MANTLE: 'Mantle',
    SupportedChain.BASE: 'Base',
    SupportedChain.PLASMA: 'Plasma',
    SupportedChain.MODE: 'Mode',
    SupportedChain.ARBITRUM: 'Arbitrum',
    SupportedChain.AVALANCHE: 'Avalanche',
    SupportedChain.INK: 'Ink',
    SupportedChain.LINEA: 'Linea',
    SupportedChain.BERACHAIN: 'Berachain',
    SupportedChain.BLAST: 'Blast',
    SupportedChain.SOLANA: 'Solana',
    SupportedChain.PLUME: 'Plume',
    SupportedChain.SCROLL: 'Scroll',
    SupportedChain.KATANA: 'Katana',
    SupportedChain.TRON: 'Tron',
}


class SupportedBridge(str, Enum):
    OPTIMISM_BRIDGE = 'optimism-bridge'
    CCTP_V2 = 'cctp-v2'
    ACROSS = 'across'
    SYMBIOSIS = 'symbiosis'
    POLYGON_BRIDGE = 'polygon-bridge'
    ZKSYNC_NATIVE = 'zksync-native'
    STARGATE_V2 = 'stargate-v2'
    ARBITRUM_BRIDGE = 'arbitrum-bridge'
    CELER = 'celer'
    BASE_BRIDGE = 'base-bridge'
    SYNAPSE = 'synapse'
    GNOSIS_NATIVE_BRIDGE = 'gnosis-native-bridge'
    MANTLE_NATIVE_BRIDGE = 'mantle-native-bridge'
    SCROLL_NATIVE_BRIDGE = 'scroll-native-bridge'
    MODE_NATIVE_BRIDGE = 'mode-native-bridge'
    INK_NATIVE_BRIDGE = 'ink-native-bridge'
    CCTP_V2_FAST = 'cctp-v2-fast'
    CCTP = 'cctp'
    ZORA_BRIDGE = 'zora-bridge'
    MAYAN = 'mayan'
    SPECTRAL_SIGNAL = 'spectral-signal'
    AAVEGOTCHI_MAINNET = 'aavegotchi-mainnet'
    B3_MAINNET = 'b3-mainnet'
    B3_NATIVE_BRIDGE = 'b3-native-bridge'

    def __str__(self):
        return self.value


class SupportedDex(str, Enum):
    RAINBOW = 'rainbow'
    ZEROX_V2 = 'zeroxv2'
    ONEINCH = 'oneinch'
    OPENOCEAN = 'openocean'
    KYBERSWAP = 'kyberswap'
    MAGPIE = 'magpie'

    def __str__(self):
        return self.value


class QuoteRequestType(str, Enum):
    SINGLE_OUTPUT_REQUEST = 'SINGLE_OUTPUT_REQUEST'
    SWAP_REQUEST = 'SWAP_REQUEST'

    def __str__(self):
        return self.value
