from ..helpers.Backend import backend


class CrossEntropyLoss:
    def __init__(self, eps=1e-12):
        self.eps = eps

    def _check(self, probs, target):
        probs = backend.ensure_array(probs, ndim=2)
        target = backend.ensure_array(target, ndim=2)
        if probs.shape != target.shape:
            raise ValueError(
                f"probs shape {probs.shape} != target shape {target.shape}"
            )
        return probs, target

    def forward(self, probs, target):
        """
        probs: (batch, num_classes)  -- softmax output, not logits
        target: (batch, num_classes) -- one-hot or soft labels
        returns: mean cross-entropy over the batch
        """
        probs, target = self._check(probs, target)
        m = probs.shape[0]
        return float(-backend.sum(target * backend.log(probs + self.eps)) / m)

    def backward(self, probs, target):
        """
        Fused softmax + CE signal w.r.t. the softmax input, per sample: probs - target.
        Matches SoftmaxLayer.backward_with_target.
        """
        probs, target = self._check(probs, target)
        return probs - target
