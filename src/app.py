# src/app.py          <-- keep it at the top level of the ZIP
# Handler path:  app.handler
#
# What it does:
#   • Hands the incoming event to the configured Echo Function handler
#   • Returns the handler's string result to the host

from echo_function.app import handler

__all__ = ["handler"]
