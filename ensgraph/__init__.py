"""
ensgraph Application Package

Directory Structure:
├── routers/           # FastAPI route handlers
│   ├── relationships.py  # relationship collection + graph projection
│   └── ens.py            # name validation and resolution
├── schemas/           # Pydantic models for API requests/responses
├── application/       # Validation, resolution orchestration, relationship rules
├── infrastructure/    # ENS provider adapter (web3.py)
├── clients/           # HTTP client for the relationship store
├── db/                # SQLAlchemy models, session and repositories
├── domain/            # Entities, errors and events
└── config.py          # Application configuration

Two independent flows:
1. **Resolution**: raw name -> validator -> ENS provider -> profile snapshot
2. **Relationships**: source/target pair -> normalization and checks -> store -> graph projection
"""
