"""
DOMAIN LAYER - Marketplace business objects

This layer contains:
- Entities: Business objects with identity (Profile, Market, ListingItemTemplate, Proposal)
- Value Objects: Closed vocabularies (SaleType, ProposalType, CryptoAddressType, SearchOrder)
- Ports: Repository interfaces that infrastructure implements
- Exceptions: Domain-specific errors, mapped to JSON-RPC error codes by the presentation layer

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
