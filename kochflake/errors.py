class KochError(Exception):
    '''Base for errors raised by kochflake'''


class InvalidArgument(KochError, ValueError):
    '''Depth or base edge the construction cannot work with'''


class ResourceLimit(KochError, RuntimeError):
    '''Depth above the ceiling; 4**depth segments would not fit'''
