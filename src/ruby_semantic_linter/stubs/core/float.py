def load(root):
    klass = root.define_constant("Float").inherits("Numeric")

    for name in ("finite?", "infinite?", "nan?", "to_r", "to_s"):
        klass.define_instance_method(name)
