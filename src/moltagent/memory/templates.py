"""Default content for the files in the agent's memory directory.

JSON files are built as dicts (serialized by the scaffolder), Markdown files
as strings. Nothing here touches the filesystem.
"""

from __future__ import annotations

from datetime import datetime, timezone

SHARED_STATE_FILE = "moltmarkets-shared-state.json"
TRADER_HISTORY_FILE = "trader-history.json"
CREATOR_ROI_FILE = "creator-roi.json"
TRADER_LEARNINGS_FILE = "trader-learnings.md"
CREATOR_LEARNINGS_FILE = "creator-learnings.md"
TRADER_KELLY_FILE = "trader-kelly.md"

# Market-topic buckets for per-category trade statistics
CATEGORIES = (
    "crypto_price",
    "news_events",
    "pr_merge",
    "github_activity",
    "cabal_response",
    "platform_meta",
)

CREATOR_CATEGORIES = ("crypto_price", "news_events", "meta_cabal")

TRADER_LEARNINGS_TEMPLATE = """\
# Trader Learnings — MoltMarkets

## Purpose
Track patterns from wins/losses and adjust strategy accordingly.

---

## ⚠️ Categories Needing Improvement

*None yet — collecting data*

---

## 📊 Category Performance Summary

| Category | Trades | Win Rate | Total PnL | Status |
|----------|--------|----------|-----------|--------|
{category_rows}

---

## 📝 Lessons Learned

*Document specific lessons after each loss*

---

*Last updated: {last_updated}*
"""

CREATOR_LEARNINGS_TEMPLATE = """\
# Creator Learnings — MoltMarkets

## Purpose
Track what types of markets generate volume. Volume = fees = ROI.

---

## 📊 Category Performance Summary

| Category | Created | Avg Volume | Zero Vol % | Status |
|----------|---------|------------|------------|--------|
{category_rows}

---

## 🎯 What Makes Markets Tradeable

- **Stakes**: Real outcome people care about
- **Edge**: Traders think they know better than market
- **Clarity**: Obviously resolvable
- **Fun**: Entertaining to participate in

---

*Last updated: {last_updated}*
"""

TRADER_KELLY = """\
# Kelly Criterion for MoltMarkets

## Formula

kelly% = edge / odds

Where:
- edge = your_probability - market_probability
- odds = 1 / market_probability (YES) or 1 / (1 - market_probability) (NO)

## Risk Adjustments

| Condition | Kelly Multiplier |
|-----------|-----------------|
| Normal | 1.0x |
| Category loss streak 2 | 0.5x |
| Category loss streak 3+ | 0x (skip) |

## Position Limits

- Max 30% of balance per bet
- Min 10% edge to bet
- Round down bet sizes
"""


def _timestamp(now: datetime | None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def shared_state(balance=0, now: datetime | None = None) -> dict:
    """Shared state record read by both the trader and the creator."""
    return {
        "balance": balance,
        "lastUpdated": _timestamp(now),
        "lastAction": {"agent": "setup", "action": "Initial setup", "cost": 0, "marketIds": []},
        "notifications": {
            "dmDylan": {
                "onResolution": False,
                "onTrade": False,
                "onCreation": False,
                "onSpawn": False,
            }
        },
        "config": {
            "trader": {
                "edgeThreshold": 0.10,
                "kellyMultiplier": 1,
                "maxPositionPct": 0.30,
                "mode": "aggressive",
            },
            "creator": {
                "maxOpenMarkets": 8,
                "cooldownMinutes": 20,
                "minBalance": 50,
                "mode": "loose-cannon",
            },
        },
        "recentTrades": [],
        "recentCreations": [],
    }


def _empty_category_stats() -> dict:
    return {
        "totalTrades": 0,
        "wins": 0,
        "losses": 0,
        "pending": 0,
        "winRate": 0,
        "totalPnL": 0,
        "recentLossStreak": 0,
        "recentWinStreak": 0,
    }


def trader_history() -> dict:
    return {
        "trades": [],
        "categoryStats": {name: _empty_category_stats() for name in CATEGORIES},
        "lastTradeId": 0,
        "netPnL": 0,
    }


def creator_roi() -> dict:
    return {
        "markets": [],
        "totalLiquiditySeeded": 0,
        "totalFeesEarned": 0,
        "netROI": 0,
        "avgVolumePerMarket": 0,
        "zeroVolumeCount": 0,
    }


def trader_learnings(now: datetime | None = None) -> str:
    rows = "\n".join(f"| {name} | 0 | - | 0ŧ | ✅ OK |" for name in CATEGORIES)
    return TRADER_LEARNINGS_TEMPLATE.format(category_rows=rows, last_updated=_timestamp(now))


def creator_learnings(now: datetime | None = None) -> str:
    rows = "\n".join(f"| {name} | 0 | - | - | 🆕 NEW |" for name in CREATOR_CATEGORIES)
    return CREATOR_LEARNINGS_TEMPLATE.format(category_rows=rows, last_updated=_timestamp(now))


def default_files(balance=0, now: datetime | None = None) -> dict[str, dict | str]:
    """All memory files in write order: JSON state first, then Markdown."""
    now = now or datetime.now(timezone.utc)
    return {
        SHARED_STATE_FILE: shared_state(balance, now),
        TRADER_HISTORY_FILE: trader_history(),
        CREATOR_ROI_FILE: creator_roi(),
        TRADER_LEARNINGS_FILE: trader_learnings(now),
        CREATOR_LEARNINGS_FILE: creator_learnings(now),
        TRADER_KELLY_FILE: TRADER_KELLY,
    }
