"""
Service views
"""
from rest_framework import viewsets
from .models import Service
from .serializers import ServiceSerializer
from utils.response import success_response
from utils.permissions import IsClinicAdminOrReadOnly


class ServiceViewSet(viewsets.ModelViewSet):
    """Services: public read, admin write"""
    queryset = Service.objects.all().order_by('name')
    serializer_class = ServiceSerializer
    permission_classes = [IsClinicAdminOrReadOnly]

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return success_response(serializer.data)

    def retrieve(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_object()).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Layanan ditambahkan')

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Layanan diperbarui')

    def destroy(self, request, *args, **kwargs):
        service = self.get_object()
        service_id = service.id
        service.delete()
        return success_response({'id': service_id}, 'Layanan dihapus')
