# core/syntax.py

# argument prefixes shared by the parser and the command usage messages

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_MODULE = "m/"
PREFIX_YEAR = "y/"
PREFIX_STUDENT_ID = "s/"
PREFIX_TEACHING_NOMINATION = "tn/"
PREFIX_COMMENT = "c/"
PREFIX_TAG = "t/"
PREFIX_ASCENDING = "a/"
PREFIX_DESCENDING = "d/"

ALL_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_MODULE,
    PREFIX_YEAR,
    PREFIX_STUDENT_ID,
    PREFIX_TEACHING_NOMINATION,
    PREFIX_COMMENT,
    PREFIX_TAG,
    PREFIX_ASCENDING,
    PREFIX_DESCENDING,
)
