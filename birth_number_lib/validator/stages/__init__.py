"""
Package that contains the concrete validation stages, in pipeline order.
"""

from birth_number_lib.validator.stages.normalizer import InputNormalizer
from birth_number_lib.validator.stages.extractor import FieldExtractor
from birth_number_lib.validator.stages.checksum import ChecksumVerifier
from birth_number_lib.validator.stages.date_validator import CalendarValidator
from birth_number_lib.validator.stages.cross_check import CrossCheckComparator
