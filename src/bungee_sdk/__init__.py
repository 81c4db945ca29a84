from .bungee_client import BungeeClient
from .bungee_entities import QuoteRequestType, SupportedBridge, SupportedChain, SupportedDex
from .bungee_request_entities import DestinationPayload, OptionalParams, QuoteParams
from .bungee_response_entities import (
    AffiliateFee,
    ApiResponse,
    ApprovalData,
    AutoRoute,
    DestinationExec,
    DexDetails,
    DexProtocol,
    GasFee,
    ManualRoute,
    QuoteInput,
    QuoteResult,
    Refuel,
    RefuelAmount,
    Rewards,
    RouteDetails,
    RouteFee,
    RouteOutput,
    SignTypedData,
    SignTypedDataDomain,
    Token,
    TxData,
)
from .errors import BadChainIdError, BungeeError, BungeeRequestError
