"""ucli -- a generic command-line HTTP client.

Maps invocations of the form ``ucli <operation> <resource>... [--flag value]...``
onto a single HTTP request against the base URL declared in a YAML
configuration file, then prints the response.

Typical workflow::

    ucli list users --page 2          # GET  /users?page=2
    ucli create users --name=John     # POST /users  {"name": "John"}
    ucli delete users 42              # DELETE /users/42

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the package.
    config: Configuration file discovery and loading.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes.
    operations: Operation verb routing and request dispatch.
    output: stdout/stderr output with Rich support.
"""

__version__ = "0.3.0"
