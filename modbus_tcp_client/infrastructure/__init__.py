"""Infrastructure layer for the Modbus client.

The infrastructure layer contains implementations of domain interfaces:
- Protocol implementations (Modbus TCP, Modbus RTU over TCP, CRC-16)
- Transport implementations (asyncio TCP)
- Connection state machine and error handling decorators

This layer depends on the domain layer, but the domain layer does NOT
depend on infrastructure.
"""
