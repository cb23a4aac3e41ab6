"""wp-cache-control - FastCGI page cache and object cache invalidation service"""

__version__ = "1.0.0"
