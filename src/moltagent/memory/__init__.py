"""Agent memory directory: persisted state and learning documents.

Layout:
    <cwd>/memory/
    ├── moltmarkets-shared-state.json   # Balance, config, recent activity
    ├── trader-history.json             # Trades + per-category stats
    ├── creator-roi.json                # Created markets + aggregate ROI
    ├── trader-learnings.md             # Category performance, lessons
    ├── creator-learnings.md            # What markets generate volume
    └── trader-kelly.md                 # Kelly sizing reference

Every file is written once at setup and never overwritten by it afterwards.
"""
