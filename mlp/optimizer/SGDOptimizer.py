class SGDOptimizer:
    def __init__(self, option):
        self.lr = option.learning_rate
        self.l2 = option.l2_regularization
        self.wd = option.regularization_rate

    def step(self, weights, bias, grad_weights, grad_bias, batch_size):
        """
        In-place mini-batch update.

        The gradients already point in the descent direction, so they are
        added. Weight decay is applied after the gradient step, bias is
        never decayed.
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        weights += self.lr * grad_weights / batch_size
        if self.l2:
            weights *= 1.0 - self.wd
        bias += self.lr * grad_bias / batch_size
