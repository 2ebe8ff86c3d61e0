"""Falling-block puzzle rules: grades, practice piece sequences and palette layering."""

__version__ = "0.1.0"

__all__ = ["grades", "palette", "seqparse", "usrseq"]