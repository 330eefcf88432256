from prometheus_client import Counter


handled_requests = Counter(
    "streamcoro_handled_requests_total",
    "Requests fulfilled by runtimes, by kind and outcome.",
    ["kind", "result"])


def successful_requests(request):
    return handled_requests.labels(kind=request.kind.value, result="Success")


def failed_requests(request, exception):
    return handled_requests.labels(kind=request.kind.value,
                                   result=exception.type_name())


read_bytes = Counter(
    "streamcoro_read_bytes_total",
    "Bytes read from streams by runtimes.")
written_bytes = Counter(
    "streamcoro_written_bytes_total",
    "Bytes written to streams by runtimes.")
