def load(root):
    root.define_constant("TypeError").inherits("StandardError")
