"""rcat.parsing – command-line parser."""
