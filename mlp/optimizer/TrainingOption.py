class TrainingOption:
    def __init__(self, learning_rate, l2_regularization=False, regularization_rate=0.0):
        # learning_rate == 0 is allowed: the step then only applies weight decay
        if learning_rate < 0:
            raise ValueError(f"learning_rate must be >= 0, got {learning_rate}")
        if not 0.0 <= regularization_rate <= 1.0:
            raise ValueError(
                f"regularization_rate must be in [0, 1], got {regularization_rate}"
            )
        self.learning_rate = float(learning_rate)
        self.l2_regularization = bool(l2_regularization)
        self.regularization_rate = float(regularization_rate)

    def __repr__(self):
        return (
            f"TrainingOption(learning_rate={self.learning_rate}, "
            f"l2_regularization={self.l2_regularization}, "
            f"regularization_rate={self.regularization_rate})"
        )
