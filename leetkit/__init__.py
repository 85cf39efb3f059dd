"""Binary tree, n-ary tree and linked list helpers with classic algorithm solutions."""

__version__ = "0.1.0"