"""
Request and response schemas. Requests are camelCase on the wire and checked
by the shared rule chains; responses wrap records in a message envelope.
"""
