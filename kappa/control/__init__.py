from kappa.control.exits import returning, for_each_labeled, Label, NonLocalReturn, LocalReturn

__all__ = ["returning", "for_each_labeled", "Label", "NonLocalReturn", "LocalReturn"]
