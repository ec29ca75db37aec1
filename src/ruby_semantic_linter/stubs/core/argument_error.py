"""ArgumentError."""


def load(root):
    klass = root.define_constant("ArgumentError").inherits("StandardError")

    klass.define_method("__class_init__")

    klass.define_instance_method("to_s")
