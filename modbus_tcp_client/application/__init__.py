"""Application layer for the Modbus client.

The application layer orchestrates domain and infrastructure pieces into
single request/response exchanges (use cases).
"""
