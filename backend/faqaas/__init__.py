"""FAQ as a Service: localized FAQs behind a JSON API, public pages and an admin console."""

__version__ = "0.1.0"
