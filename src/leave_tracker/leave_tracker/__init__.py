"""Leave Tracker package.

Organized by feature modules (employees, requests, leave) with in-memory
repositories, a service layer holding the business rules and a thin Flask
controller layer on top.
"""
