# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Import the Gliese catalogs and write the merged stars to a CSV file.

The accurate coordinates catalog (GJAC) is imported first, if given, then the CNS3 catalog is imported and merged with
it.  Common names are attached from an optional ``name,identifier`` CSV file.  The number of stars imported from each
catalog is printed, and the merged CNS3 stars are written with the columns of :attr:`.STAR_COLUMNS` (or summarized on
screen if no output file is given).
"""

import logging

from argparse import ArgumentParser

from starcross.catalogs.gliese import GlieseImportOptions, import_gj_ac, import_gj_cns3
from starcross.catalogs.meta_catalog import records_to_frame
from starcross.catalogs.names import load_name_map


def _get_parser() -> ArgumentParser:
    """
    Helper function for the argparse extension

    :return: A setup argument parser
    """

    parser = ArgumentParser(description='Import the Gliese CNS3 and GJAC catalogs and merge them')

    parser.add_argument('-c', '--cns3', help='The CNS3 catalog file', required=True, type=str)
    parser.add_argument('-g', '--gjac', help='The accurate coordinates for Gliese catalog stars file', default=None,
                        type=str)
    parser.add_argument('-n', '--names', help='A name,identifier CSV file of common star names', default=None,
                        type=str)
    parser.add_argument('-o', '--output', help='The CSV file to write the merged stars to', default=None, type=str)

    parser.add_argument('-p', '--minimum_parallax', help='The parallax in mas at or below which distances are '
                                                         'left unknown',
                        default=1.0, type=float)
    parser.add_argument('--no_proper_motion', help='Do not move CNS3 positions from 1950 to 2000 along their proper '
                                                   'motion', action='store_true')
    parser.add_argument('-v', '--verbose', help='Log the progress of the import', action='store_true')

    return parser


def main():
    """
    Parse the command line arguments and then import the catalogs.
    """

    parser = _get_parser()

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    options = GlieseImportOptions(minimum_parallax=args.minimum_parallax,
                                  propagate_proper_motion=not args.no_proper_motion)

    name_map = {} if args.names is None else load_name_map(args.names)

    gjac_stars = []
    if args.gjac is not None:
        number_gjac = import_gj_ac(args.gjac, [], gjac_stars, options=options)
        print('Imported {} stars from {}'.format(number_gjac, args.gjac), flush=True)

    stars = []
    number_cns3 = import_gj_cns3(args.cns3, name_map, gjac_stars, stars, options=options)
    print('Imported {} stars from {}'.format(number_cns3, args.cns3), flush=True)

    frame = records_to_frame(stars)

    if args.output is not None:
        frame.to_csv(args.output, index=False)
        print('Wrote {} stars to {}'.format(len(frame), args.output), flush=True)
    else:
        print(frame.describe(), flush=True)


if __name__ == '__main__':
    main()
