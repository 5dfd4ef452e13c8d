"""
PayPal payload and response models.

Import from the resource module (``data.orders``, ``data.invoice``,
``data.payment``); some names such as ``Item`` exist in more than one API.
"""
