"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → RPC commands (root commands dispatch to sub-commands)
- services/  → Validation and orchestration over repositories
- dto/       → Request models (pydantic)
- common/    → RpcRequest, RpcCommand base class, command names

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
