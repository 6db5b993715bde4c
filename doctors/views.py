"""
Doctor views
"""
from rest_framework import generics
from rest_framework.views import APIView
from .models import Doctor
from .serializers import DoctorSerializer
from utils.response import success_response, error_response
from utils.permissions import IsClinicAdmin, IsClinicAdminOrReadOnly


DOCTOR_NOT_FOUND = 'Dokter tidak ditemukan'


class DoctorList(generics.ListCreateAPIView):
    """Doctor list (public) and creation (admin)"""
    queryset = Doctor.objects.all()
    serializer_class = DoctorSerializer
    permission_classes = [IsClinicAdminOrReadOnly]

    def list(self, request, *args, **kwargs):
        """List doctors ordered by name"""
        queryset = self.get_queryset().order_by('name')

        # ?active=1 keeps only active doctors
        active = request.query_params.get('active')
        if active in ('1', 'true', 'True'):
            queryset = queryset.filter(status=True)

        specialty = request.query_params.get('specialty')
        if specialty:
            queryset = queryset.filter(specialty=specialty)

        serializer = self.get_serializer(queryset, many=True)
        return success_response(serializer.data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Dokter ditambahkan')


class DoctorDetail(generics.RetrieveUpdateDestroyAPIView):
    """Doctor detail, update and delete"""
    queryset = Doctor.objects.all()
    serializer_class = DoctorSerializer
    permission_classes = [IsClinicAdminOrReadOnly]

    def retrieve(self, request, *args, **kwargs):
        doctor = Doctor.objects.filter(pk=kwargs.get('pk')).first()
        if doctor is None:
            return error_response(DOCTOR_NOT_FOUND, 404)
        return success_response(self.get_serializer(doctor).data)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        doctor = self.get_object()
        serializer = self.get_serializer(doctor, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Dokter diperbarui')

    def destroy(self, request, *args, **kwargs):
        doctor = self.get_object()
        doctor_id = doctor.id
        # reservations keep their rows, doctor reference becomes null
        doctor.delete()
        return success_response({'id': doctor_id}, 'Dokter dihapus')


class ToggleDoctorStatus(APIView):
    """Flip a doctor between active and inactive"""
    permission_classes = [IsClinicAdmin]

    def post(self, request, pk):
        doctor = Doctor.objects.filter(pk=pk).first()
        if doctor is None:
            return error_response(DOCTOR_NOT_FOUND, 404)

        doctor.status = not doctor.status
        doctor.save(update_fields=['status', 'updated_at'])
        return success_response({'id': doctor.id, 'status': doctor.status}, 'Status dokter diperbarui')
