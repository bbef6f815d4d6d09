"""Provider-neutral building blocks for generative AI chat clients."""

__version__ = "0.1.22"

__all__ = ["chat", "client", "common", "errors", "resolver", "service_target", "webc"]