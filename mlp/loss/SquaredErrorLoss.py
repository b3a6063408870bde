from ..helpers.Backend import backend


class SquaredErrorLoss:
    def _check(self, predicted, target):
        predicted = backend.ensure_array(predicted, ndim=2)
        target = backend.ensure_array(target, ndim=2)
        if predicted.shape != target.shape:
            raise ValueError(
                f"predicted shape {predicted.shape} != target shape {target.shape}"
            )
        return predicted, target

    def forward(self, predicted, target):
        """
        predicted, target: (batch, units)
        returns: 0.5 * sum((predicted - target)**2) / batch
        """
        predicted, target = self._check(predicted, target)
        m = predicted.shape[0]
        return float(0.5 * backend.sum((predicted - target) ** 2) / m)

    def backward(self, predicted, target):
        # dL/dpredicted per sample; DenseLayer.backward_with_target uses the same factor
        predicted, target = self._check(predicted, target)
        return predicted - target
