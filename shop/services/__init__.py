"""
High-level use cases for the shop API.

Each service module orchestrates repositories to implement business rules
(register a customer, add a product, place an order) and declares the errors
it raises. Routers call these services instead of touching the database.
"""
