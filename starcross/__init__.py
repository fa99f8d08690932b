# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
starcross ingests fixed column star catalogs, brings them to a common epoch, frame and set of units, and cross matches
and merges them through catalog tagged identifiers.
"""

__version__ = '1.0.0'
