"""Shared application interfaces: RpcRequest, RpcCommand, Commands."""
