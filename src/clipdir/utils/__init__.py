from clipdir.utils.formatting import human_readable_size

__all__ = ['human_readable_size']
