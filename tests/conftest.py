"""
Pytest configuration and fixtures for the directory API tests.

Every test gets its own application with an empty (unseeded) store,
so ids start at 1 and no state leaks between tests.
"""

from dataclasses import replace
from typing import Any, Dict

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from prop_directory_api.app.core.config import settings
from prop_directory_api.app.core.store import Store
from prop_directory_api.app.main import create_app


@pytest.fixture
def app() -> FastAPI:
    return create_app(
        replace(
            settings,
            seed_sample_data=False,
            compare_limit=3,
            admin_username="admin",
            admin_password="admin123",
        )
    )


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def store(app: FastAPI) -> Store:
    return app.state.store


@pytest.fixture
def firm_payload() -> Dict[str, Any]:
    """A valid firm creation body with one account type of each kind."""
    return {
        "name": "Apex Trader Funding",
        "description": "Futures prop firm with one-step evaluations.",
        "websiteUrl": "https://apextraderfunding.com",
        "profitSplit": 90,
        "challengeFeeMin": 147,
        "tradingPlatforms": ["NinjaTrader", "Rithmic"],
        "tradableAssets": ["Futures"],
        "featured": True,
        "accountTypes": [
            {
                "accountType": "evaluation",
                "accountSize": 50000,
                "drawdownType": "TMDD",
                "price": 100,
                "currentDiscountRate": 25,
                "targetProfit": 3000,
            },
            {
                "accountType": "instant",
                "accountSize": 25000,
                "drawdownType": "EOD",
                "price": 99.99,
                "currentDiscountRate": 10,
                "minFundedDays": 7,
            },
        ],
        "extra": [{"key": "News trading", "value": "Allowed"}],
    }


@pytest.fixture
def review_payload() -> Dict[str, Any]:
    return {
        "firmId": 1,
        "username": "James Wilson",
        "rating": 5,
        "title": "Fast payouts",
        "content": "Got paid within two days of requesting.",
    }


@pytest.fixture
def resource_payload() -> Dict[str, Any]:
    return {
        "title": "Risk Management Techniques for Prop Traders",
        "content": "<p>Size positions from your daily loss limit.</p>",
        "summary": "Protect your capital under drawdown rules.",
        "category": "Risk Management",
        "authorName": "Michael Chen",
        "readTime": 12,
    }
