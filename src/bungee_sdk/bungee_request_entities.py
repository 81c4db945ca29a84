from dataclasses import dataclass, field, fields
from decimal import Decimal, InvalidOperation
from typing import Dict, FrozenSet, Optional, Union

from dataclasses_json import dataclass_json, LetterCase

from .bungee_entities import SupportedBridge, SupportedChain, SupportedDex

Amount = Union[Decimal, int, str]


def to_amount(value: Amount) -> Decimal:
    """Amounts are exact and finite: floats, bools, NaN and Infinity are refused."""
    if isinstance(value, (bool, float)):
        raise ValueError(f"Amount must be a Decimal, int or numeric string, got {type(value).__name__}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError):
        raise ValueError(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return amount


def _query_value(value) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Decimal):
        return format(value, 'f')
    if isinstance(value, (frozenset, set)):
        return ','.join(sorted(str(member) for member in value))
    return str(value)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass(frozen=True)
class DestinationPayload:
    """Calldata executed on the destination chain and the gas limit for it. Always sent as a pair."""
    destination_payload: str
    destination_gas_limit: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'destination_gas_limit', to_amount(self.destination_gas_limit))

    def to_query_params(self) -> Dict[str, str]:
        return {
            'destinationPayload': self.destination_payload,
            'destinationGasLimit': _query_value(self.destination_gas_limit),
        }


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass(frozen=True)
class OptionalParams:
    slippage: Optional[Decimal] = None
    delegate_address: Optional[str] = None
    refuel: Optional[bool] = None
    destination: Optional[DestinationPayload] = None
    fee_bps: Optional[Decimal] = None
    fee_taker_address: Optional[str] = None
    enable_manual: Optional[bool] = None
    disable_swapping: Optional[bool] = None
    disable_auto: Optional[bool] = None
    exclude_bridges: Optional[FrozenSet[SupportedBridge]] = None
    include_bridges: Optional[FrozenSet[SupportedBridge]] = None
    exclude_dexes: Optional[FrozenSet[SupportedDex]] = None
    include_dexes: Optional[FrozenSet[SupportedDex]] = None
    exclusive_transmitter: Optional[str] = None
    use_inbox: Optional[bool] = None

    def __post_init__(self):
        for name in ('slippage', 'fee_bps'):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, to_amount(value))
        for name, member_type in (('exclude_bridges', SupportedBridge), ('include_bridges', SupportedBridge),
                                  ('exclude_dexes', SupportedDex), ('include_dexes', SupportedDex)):
            value = getattr(self, name)
            if value is not None:
                # an empty set means the param is not sent at all
                object.__setattr__(self, name, frozenset(member_type(member) for member in value) or None)

    def to_query_params(self) -> Dict[str, str]:
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, DestinationPayload):
                params.update(value.to_query_params())
            else:
                params[LetterCase.CAMEL(f.name)] = _query_value(value)
        return params


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass(frozen=True)
class QuoteParams:
    """Params for /api/v1/bungee/quote"""
    user_address: str
    origin_chain_id: SupportedChain
    destination_chain_id: SupportedChain
    input_token: str
    input_amount: Decimal
    receiver_address: str
    output_token: str
    optional_params: OptionalParams = field(default_factory=OptionalParams)

    def __post_init__(self):
        object.__setattr__(self, 'origin_chain_id', SupportedChain.from_wire(self.origin_chain_id))
        object.__setattr__(self, 'destination_chain_id', SupportedChain.from_wire(self.destination_chain_id))
        object.__setattr__(self, 'input_amount', to_amount(self.input_amount))

    def to_query_params(self) -> Dict[str, str]:
        # optional params are merged into the same flat mapping, no nested key
        params = {
            'userAddress': self.user_address,
            'originChainId': self.origin_chain_id.to_wire(),
            'destinationChainId': self.destination_chain_id.to_wire(),
            'inputToken': self.input_token,
            'inputAmount': _query_value(self.input_amount),
            'receiverAddress': self.receiver_address,
            'outputToken': self.output_token,
        }
        params.update(self.optional_params.to_query_params())
        return params
