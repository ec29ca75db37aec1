def load(root):
    root.define_constant("RuntimeError").inherits("StandardError")
