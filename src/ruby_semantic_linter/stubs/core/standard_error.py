"""StandardError, the default for bare rescue clauses."""


def load(root):
    root.define_constant("StandardError").inherits("Exception")
