"""Namespace for notifiers; it currently holds no modules."""