"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from dotenv import load_dotenv

# BUNGEE_API_KEY / BUNGEE_LIVE_TESTS for the live quote test
load_dotenv()

from bungee_sdk import BungeeClient, QuoteParams, SupportedChain

VITALIK = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
NATIVE_TOKEN = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"
USDC_OP = "0x0b2c639c533813f4aa9d7837caf62653d097ff85"


def token_payload(chain_id=10, address=USDC_OP, symbol="USDC", decimals=6):
    return {
        "chainId": chain_id,
        "address": address,
        "name": symbol,
        "symbol": symbol,
        "decimals": decimals,
        "logoURI": f"https://media.socket.tech/tokens/{symbol.lower()}.png",
        "icon": f"https://media.socket.tech/tokens/{symbol.lower()}.png",
    }


def route_details_payload():
    return {
        "name": "Bungee Protocol",
        "logoURI": "https://media.socket.tech/bungee.png",
        "routeFee": {
            "token": token_payload(42161, NATIVE_TOKEN, "ETH", 18),
            "amount": "12000000000",
            "feeInUsd": "0.00004",
            "priceInUsd": "3412.55",
        },
        "dexDetails": {
            "protocol": {"name": "oneinch", "displayName": "1inch", "icon": "https://media.socket.tech/1inch.png"},
            "minAmountOut": "336000",
            "outputTokenAddress": USDC_OP,
            "inputTokenAddress": NATIVE_TOKEN,
            "amountOut": "341000",
            "slippage": "0.5",
        },
    }


def route_output_payload():
    return {
        "token": token_payload(),
        "amount": "341000",
        "priceInUsd": "0.9999",
        "valueInUsd": "0.340966",
        "minAmountOut": "336000",
        "effectiveReceivedInUsd": "0.3409",
    }


def auto_route_payload():
    return {
        "userOp": "sign",
        "requestHash": "0x5b1c7c2f0f1a4a3f5e9f8a2b7d1c4e6f8a0b2c4d6e8f0a1b3c5d7e9f1a3b5c7d",
        "output": route_output_payload(),
        "requestType": "SINGLE_OUTPUT_REQUEST",
        "slippage": "0.5",
        "suggestedClientSlippage": "0.5",
        "estimatedTime": 12,
        "routeDetails": route_details_payload(),
        "quoteId": "b9a5b1c6e2f04bd5a3d1c0e7f2a4b6c8",
        "quoteExpiry": 1760812345,
        "rewards": {
            "rebateAmount": "0",
            "rewardAmount": "0",
            "totalRewardAmount": "0",
            "totalRewardAmountInUsd": "0",
            "token": token_payload(),
            "isRewardEnabled": False,
        },
    }


def manual_route_payload():
    return {
        "quoteId": "2f0c0a1e6b7d4c3e9a8b5d4c3b2a1f0e",
        "output": route_output_payload(),
        "gasFee": {
            "gasToken": token_payload(42161, NATIVE_TOKEN, "ETH", 18),
            "gasLimit": "350000",
            "gasPrice": "10000000",
            "estimatedFee": "3500000000000",
            "feeInUsd": "0.0119",
        },
        "slippage": "0.5",
        "estimatedTime": 60,
        "routeDetails": route_details_payload(),
    }


def quote_result_payload():
    return {
        "originChainId": 42161,
        "destinationChainId": 10,
        "receiverAddress": VITALIK,
        "userAddress": VITALIK,
        "input": {
            "token": token_payload(42161, NATIVE_TOKEN, "ETH", 18),
            "amount": "100000000000000",
            "priceInUsd": "3412.55",
            "valueInUsd": "0.341255",
        },
        "autoRoute": auto_route_payload(),
    }


@pytest.fixture
def success_body():
    return {
        "success": True,
        "statusCode": 200,
        "result": quote_result_payload(),
    }


@pytest.fixture
def failure_body():
    return {
        "success": False,
        "statusCode": 400,
        "message": "inputAmount must be a positive integer",
    }


@pytest.fixture
def manual_route():
    return manual_route_payload()


@pytest.fixture
def quote_params():
    return QuoteParams(
        user_address=VITALIK,
        origin_chain_id=SupportedChain.ARBITRUM,
        destination_chain_id=SupportedChain.OPTIMISM,
        input_token=NATIVE_TOKEN,
        input_amount="100000000000000",
        receiver_address=VITALIK,
        output_token=USDC_OP,
    )


class FakeBungee:
    """Serves a canned body on /quote and records the incoming requests."""

    def __init__(self):
        self.text = "{}"
        self.status = 200
        self.requests = []

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(request)
        return web.Response(text=self.text, status=self.status, content_type="application/json")


@pytest_asyncio.fixture
async def fake_bungee():
    fake = FakeBungee()
    app = web.Application()
    app.router.add_get("/api/v1/bungee/quote", fake.handle)
    server = TestServer(app)
    await server.start_server()
    fake.url = str(server.make_url("/api/v1/bungee/quote"))
    yield fake
    await server.close()


@pytest_asyncio.fixture
async def client(fake_bungee):
    bungee_client = BungeeClient(api_key="", url=fake_bungee.url)
    yield bungee_client
    await bungee_client.close()
