"""
Store construction and sample data.

:func:`build_store` is called once by ``create_app``.  It registers
the configured admin account and, unless ``seed_sample_data`` is off,
inserts a few firms, resources and reviews through the regular
services so that seeded records obey the same invariants (sequential
ids, derived ratings and discounted prices) as records created over
HTTP.
"""

import logging
from datetime import datetime, timezone

from ..schemas.firm import FirmCreate
from ..schemas.resource import ResourceCreate
from ..schemas.review import ReviewCreate
from ..services.firm_service import FirmService
from ..services.resource_service import ResourceService
from ..services.review_service import ReviewService
from ..services.user_service import UserService
from .config import Settings
from .store import Store

logger = logging.getLogger(__name__)

SAMPLE_FIRMS = [
    {
        "name": "FTMO",
        "logo": "",
        "description": (
            "FTMO is a proprietary trading firm offering funded accounts to successful "
            "traders. They have a rigorous two-phase evaluation process before providing "
            "a funded account."
        ),
        "websiteUrl": "https://ftmo.com",
        "maxAccountSize": 200000,
        "profitSplit": 80,
        "challengeFeeMin": 540,
        "challengeFeeMax": 1080,
        "payoutTime": 14,
        "maxDailyDrawdown": 5,
        "maxTotalDrawdown": 10,
        "minTradingDays": 10,
        "scalingPlan": True,
        "tradingPlatforms": ["MetaTrader 4", "MetaTrader 5", "cTrader"],
        "tradableAssets": ["Forex", "Commodities", "Indices", "Cryptos", "Stocks"],
        "evaluationStages": ["Challenge", "Verification"],
        "featured": True,
        "accountTypes": [
            {
                "accountType": "evaluation",
                "stage": 1,
                "accountSize": 100000,
                "drawdownType": "EOD",
                "price": 540,
                "currentDiscountRate": 10,
                "targetProfit": 10000,
                "MLL": 10000,
                "DLL": 5000,
                "payoutRatio": 80,
                "payoutFrequency": "bi-weekly",
                "minEvaluationDays": 4,
            },
        ],
        "extra": [{"key": "Refundable fee", "value": "Fee refunded with the first payout"}],
    },
    {
        "name": "Funded Next",
        "logo": "",
        "description": (
            "Funded Next provides traders with capital to trade financial markets. They "
            "offer a straightforward evaluation process and competitive profit splits."
        ),
        "websiteUrl": "https://fundednext.com",
        "maxAccountSize": 400000,
        "profitSplit": 90,
        "challengeFeeMin": 349,
        "challengeFeeMax": 999,
        "payoutTime": 7,
        "maxDailyDrawdown": 4,
        "maxTotalDrawdown": 8,
        "minTradingDays": 0,
        "scalingPlan": True,
        "tradingPlatforms": ["MetaTrader 4", "MetaTrader 5"],
        "tradableAssets": ["Forex", "Commodities", "Indices", "Cryptos"],
        "featured": True,
        "accountTypes": [
            {
                "accountType": "instant",
                "accountSize": 50000,
                "drawdownType": "TMDD",
                "price": 349,
                "currentDiscountRate": 20,
                "MLL": 3000,
                "DLL": 1500,
                "payoutRatio": 90,
                "payoutFrequency": "weekly",
                "minFundedDays": 5,
            },
        ],
    },
    {
        "name": "The Funded Trader",
        "logo": "",
        "description": (
            "The Funded Trader offers funded accounts with a user-friendly evaluation "
            "process. They are known for their quick payouts and excellent customer support."
        ),
        "websiteUrl": "https://thefundedtrader.com",
        "maxAccountSize": 200000,
        "profitSplit": 85,
        "challengeFeeMin": 375,
        "challengeFeeMax": 975,
        "payoutTime": 5,
        "maxDailyDrawdown": 5,
        "maxTotalDrawdown": 8,
        "minTradingDays": 5,
        "scalingPlan": True,
        "tradingPlatforms": ["MetaTrader 4", "MetaTrader 5"],
        "tradableAssets": ["Forex", "Commodities", "Indices", "Cryptos"],
        "featured": True,
    },
]

SAMPLE_RESOURCES = [
    {
        "title": "How to Pass a Prop Firm Challenge",
        "content": "<p>This comprehensive guide walks you through the essential strategies for passing prop firm challenges...</p>",
        "summary": "Essential strategies and tips for successfully passing prop firm evaluations and securing funded accounts.",
        "category": "Beginner Guide",
        "authorName": "Sarah Johnson",
        "authorImage": "https://randomuser.me/api/portraits/women/40.jpg",
        "image": "https://images.unsplash.com/photo-1611974789855-9c2a0a7236a3",
        "readTime": 8,
        "publishedAt": datetime(2023, 8, 15, tzinfo=timezone.utc),
    },
    {
        "title": "Risk Management Techniques for Prop Traders",
        "content": "<p>Learn effective risk management strategies to protect your capital and navigate prop firm drawdown rules...</p>",
        "summary": "Learn effective risk management strategies to protect your capital and navigate prop firm drawdown rules.",
        "category": "Risk Management",
        "authorName": "Michael Chen",
        "authorImage": "https://randomuser.me/api/portraits/men/35.jpg",
        "image": "https://images.unsplash.com/photo-1642543348745-03b1219733d9",
        "readTime": 12,
        "publishedAt": datetime(2023, 9, 22, tzinfo=timezone.utc),
    },
    {
        "title": "Top 5 Prop Trading Firms of 2023",
        "content": "<p>Comprehensive reviews and comparisons of the leading proprietary trading firms based on trader feedback...</p>",
        "summary": "Comprehensive reviews and comparisons of the leading proprietary trading firms based on trader feedback.",
        "category": "Compare & Review",
        "authorName": "Alex Rodriguez",
        "authorImage": "https://randomuser.me/api/portraits/men/65.jpg",
        "image": "https://images.unsplash.com/photo-1526628953301-3e589a6a8b74",
        "readTime": 15,
        "publishedAt": datetime(2023, 10, 8, tzinfo=timezone.utc),
    },
]

# Reviews reference firms by position in SAMPLE_FIRMS (1-based ids).
SAMPLE_REVIEWS = [
    {
        "firmId": 1,
        "username": "James Wilson",
        "rating": 5,
        "title": "Excellent Platform and Support",
        "content": "FTMO has been life-changing for me. Their platform is incredibly stable, and their support team is responsive.",
        "tradingExperience": "Forex Trader, 2 years with FTMO",
    },
    {
        "firmId": 3,
        "username": "Emma Thompson",
        "rating": 4,
        "title": "Great Profit Split",
        "content": "The Funded Trader offers the best profit split I've found. Their challenge rules are reasonable.",
        "tradingExperience": "Futures Trader, 1 year with TFT",
    },
    {
        "firmId": 2,
        "username": "David Kumar",
        "rating": 4,
        "title": "Competitive Fees",
        "content": "Funded Next has some of the most competitive challenge fees in the industry.",
        "tradingExperience": "Crypto Trader, 6 months with Funded Next",
    },
]


def seed_sample_data(store: Store) -> None:
    """Insert the sample firms, resources and reviews into ``store``."""
    for payload in SAMPLE_FIRMS:
        FirmService.create_firm(store, FirmCreate.model_validate(payload))
    for payload in SAMPLE_RESOURCES:
        ResourceService.create_resource(store, ResourceCreate.model_validate(payload))
    for payload in SAMPLE_REVIEWS:
        ReviewService.create_review(store, ReviewCreate.model_validate(payload))
    logger.info(
        "Seeded %s firms, %s resources and %s reviews",
        len(SAMPLE_FIRMS),
        len(SAMPLE_RESOURCES),
        len(SAMPLE_REVIEWS),
    )


def build_store(app_settings: Settings) -> Store:
    """Create the application store and populate it."""
    store = Store()
    UserService.add_admin(store, app_settings.admin_username, app_settings.admin_password)
    if app_settings.seed_sample_data:
        seed_sample_data(store)
    return store
