"""Domain layer for the Modbus client.

The domain layer holds the protocol vocabulary (framing modes, connection
states, function and exception codes), the error taxonomy, register packing
helpers and the interfaces the infrastructure layer implements. It has no
dependencies on sockets or asyncio.
"""
