from decimal import Decimal
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from .bungee_entities import QuoteRequestType, SupportedChain
from .bungee_request_entities import to_amount

# chain ids arrive as numbers (sometimes numeric strings) and must name a known chain
Chain = Annotated[SupportedChain, BeforeValidator(SupportedChain.from_wire)]
Amount = Annotated[Decimal, BeforeValidator(to_amount)]


class BungeeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @classmethod
    def from_dict(cls, kvs: dict):
        return cls.model_validate(kvs)

    def to_dict(self) -> dict:
        """Wire form: camelCase keys, numeric chain ids, amounts as strings."""
        return self.model_dump(by_alias=True, mode='json', exclude_none=True)


class Token(BungeeModel):
    chain_id: Chain
    address: StrictStr
    name: StrictStr
    symbol: StrictStr
    decimals: StrictInt
    logo_uri: StrictStr = Field(alias='logoURI')
    icon: StrictStr

    def __str__(self):
        return f'{self.chain_id.display_name}.{self.symbol}'


class QuoteInput(BungeeModel):
    token: Token
    amount: Amount
    price_in_usd: Amount
    value_in_usd: Amount


class DestinationExec(BungeeModel):
    """Echo of the destinationPayload / destinationGasLimit pair sent with the request."""
    destination_payload: StrictStr
    destination_gas_limit: Amount


class RouteOutput(BungeeModel):
    token: Token
    amount: Amount
    price_in_usd: Amount
    value_in_usd: Amount
    min_amount_out: Amount
    effective_received_in_usd: Amount


class ApprovalData(BungeeModel):
    spender_address: StrictStr
    amount: Amount
    token_address: StrictStr
    user_address: StrictStr


class AffiliateFee(BungeeModel):
    token: Token
    amount: Amount
    fee_taker_address: StrictStr


class SignTypedDataDomain(BungeeModel):
    name: StrictStr
    chain_id: Chain
    verifying_contract: StrictStr
    version: StrictStr
    salt: Any = None


class SignTypedData(BungeeModel):
    """EIP-712 payload to sign off-chain. types and values are arbitrary JSON, passed through as-is."""
    domain: SignTypedDataDomain
    types: Any
    values: Any


class GasFee(BungeeModel):
    gas_token: Token
    gas_limit: Amount
    gas_price: Amount
    estimated_fee: Amount
    fee_in_usd: Amount


class TxData(BungeeModel):
    data: StrictStr
    to: StrictStr
    chain_id: Chain
    value: StrictStr


class RouteFee(BungeeModel):
    token: Token
    amount: Amount
    fee_in_usd: Amount
    price_in_usd: Amount


class DexProtocol(BungeeModel):
    name: StrictStr
    display_name: StrictStr
    icon: StrictStr


class DexDetails(BungeeModel):
    protocol: DexProtocol
    min_amount_out: Amount
    output_token_address: StrictStr
    input_token_address: StrictStr
    amount_out: Amount
    slippage: Amount


class RouteDetails(BungeeModel):
    name: StrictStr
    logo_uri: StrictStr = Field(alias='logoURI')
    route_fee: RouteFee
    dex_details: DexDetails


class RefuelAmount(BungeeModel):
    token: Token
    amount: Amount


class Refuel(BungeeModel):
    input: RefuelAmount
    output: RefuelAmount


class Rewards(BungeeModel):
    rebate_amount: Amount
    reward_amount: Amount
    total_reward_amount: Amount
    total_reward_amount_in_usd: Amount
    token: Token
    is_reward_enabled: StrictBool


class AutoRoute(BungeeModel):
    user_op: StrictStr
    request_hash: StrictStr
    output: RouteOutput
    request_type: QuoteRequestType
    slippage: Amount
    suggested_client_slippage: Amount
    estimated_time: Amount
    route_details: RouteDetails
    quote_id: StrictStr
    quote_expiry: StrictInt
    rewards: Rewards
    approval_data: Optional[ApprovalData] = None
    affiliate_fee: Optional[AffiliateFee] = None
    sign_typed_data: Optional[SignTypedData] = None
    gas_fee: Optional[GasFee] = None
    tx_data: Optional[TxData] = None
    refuel: Optional[Refuel] = None


class ManualRoute(BungeeModel):
    quote_id: StrictStr
    output: RouteOutput
    gas_fee: GasFee
    slippage: Amount
    estimated_time: Amount
    route_details: RouteDetails
    affiliate_fee: Optional[AffiliateFee] = None
    approval_data: Optional[ApprovalData] = None
    refuel: Optional[Refuel] = None


class QuoteResult(BungeeModel):
    origin_chain_id: Chain
    destination_chain_id: Chain
    receiver_address: StrictStr
    user_address: StrictStr
    input: QuoteInput
    destination_exec: Optional[DestinationExec] = None
    auto_route: Optional[AutoRoute] = None
    manual_routes: List[ManualRoute] = Field(default_factory=list)

    @field_validator('manual_routes', mode='before')
    @classmethod
    def null_manual_routes_to_empty(cls, value):
        return [] if value is None else value


class ApiResponse(BungeeModel):
    """
    Envelope returned by /api/v1/bungee/quote.

    success=False with a message is a normal response, not an error: result is
    None and the caller decides what to do with the message.
    """
    success: StrictBool
    status_code: StrictInt
    result: Optional[QuoteResult] = None
    message: Optional[StrictStr] = None
