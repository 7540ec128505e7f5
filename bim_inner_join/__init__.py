"""
PLINK BIM Inner Join Tool.

Finds the variants shared by several sorted .bim files, checking that the
alleles reported at each shared locus agree.
"""

__version__ = "1.0.0"
__author__ = "Data Tecnica International"
